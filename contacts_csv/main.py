from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from .models import ConvertResponse, HealthResponse
from .convert import convert_bytes

app = FastAPI(
    title="contacts-csv",
    description="Form export to contact-import CSV conversion",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/convert", response_model=ConvertResponse)
async def convert_csv(file: UploadFile = File(...), label: str = Form("")):
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    return convert_bytes(raw, label)
