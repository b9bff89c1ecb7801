"""
Conversion pipeline.

Responsibilities:
- decode input bytes (UTF-8 first, charset detection as fallback)
- skip the header and empty lines
- tokenize, map and re-encode each data row
- recover from row-level problems and report them
- write UTF-8 with BOM output
"""

from __future__ import annotations

import base64
import hashlib
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from charset_normalizer import from_bytes

from .csvline import format_csv_row, parse_csv_line, split_lines
from .mapping import RowTooShort, map_row
from .rules import OUTPUT_HEADER, OUTPUT_NEWLINE, TARGET_ENCODING

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


class ConversionError(Exception):
    """A fatal condition: nothing was converted."""


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _item(row: int, issue: str, value: str | None, action: str) -> Dict[str, Any]:
    return {
        "row": row,
        "column": None,
        "issue": issue,
        "value": value,
        "action": action,
    }


def decode_input(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode input bytes to text with LF line endings.

    Rules:
    - Valid UTF-8 (with or without BOM) is taken as is.
    - Otherwise use charset-normalizer's best guess.
    - If that fails too, decode UTF-8 with replacement characters and report it.
    """
    detected = None
    decode_fallback = False

    try:
        text = raw.decode("utf-8-sig")
        decode_used = "utf-8-sig" if raw.startswith(UTF8_BOM) else "utf-8"
        detected = "utf_8"
    except UnicodeDecodeError:
        match = from_bytes(raw).best()
        if match is not None:
            detected = match.encoding
        decode_used = detected or "utf-8"
        try:
            text = raw.decode(decode_used)
        except (UnicodeDecodeError, LookupError):
            decode_used = "utf-8"
            text = raw.decode(decode_used, errors="replace")
            decode_fallback = True

    if decode_used not in ("utf-8", "utf-8-sig"):
        logger.info("input decoded as %s", decode_used)
    if decode_fallback:
        logger.warning("input is not valid in any detected encoding; undecodable bytes were replaced")

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }
    return text, report


def convert_lines(
    lines: Iterable[str], label: str
) -> Tuple[List[str], List[Dict[str, Any]], List[Dict[str, Any]]]:
    """
    Convert input lines (header included) into encoded output data lines.

    Returns (data_lines, warnings, errors). The header is the first non-empty
    line and is never parsed.
    """
    data_lines: List[str] = []
    warnings: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []
    header_seen = False

    for line_number, line in enumerate(lines, start=1):
        if not line:
            logger.warning("skipped empty line #%d", line_number, extra={"line_number": line_number})
            warnings.append(_item(line_number, "empty_line", None, "skipped"))
            continue

        if not header_seen:
            header_seen = True
            continue

        fields = parse_csv_line(line)
        try:
            out = map_row(fields, label)
            data_lines.append(format_csv_row(out))
        except RowTooShort as e:
            logger.warning(
                "line #%d skipped: %s. Line: %s",
                line_number,
                e,
                line,
                extra={"line_number": line_number},
            )
            warnings.append(_item(line_number, "too_few_fields", str(e.found), "skipped"))
        except Exception as e:
            logger.error(
                "line #%d failed: %s. Line: %s",
                line_number,
                e,
                line,
                extra={"line_number": line_number},
            )
            errors.append(_item(line_number, "row_failed", str(e), "skipped"))

    return data_lines, warnings, errors


def render_output(data_lines: Iterable[str]) -> str:
    return OUTPUT_HEADER + OUTPUT_NEWLINE + "".join(data_lines)


def convert_text(text: str, label: str) -> Tuple[str, Dict[str, Any]]:
    data_lines, warnings, errors = convert_lines(split_lines(text), label)
    report = {
        "summary": {
            "rows_processed": len(data_lines),
            "rows_skipped": len(warnings) + len(errors),
            "warnings": len(warnings),
            "errors": len(errors),
            "label": label,
        },
        "warnings": warnings,
        "errors": errors,
    }
    return render_output(data_lines), report


def convert_bytes(raw: bytes, label: str = "") -> Dict[str, Any]:
    """
    Convert an uploaded export.
    Returns a dict matching the API's response envelope.
    """
    text, decoding = decode_input(raw)
    output, report = convert_text(text, label)
    report["decoding"] = decoding

    converted = output.encode(TARGET_ENCODING)
    return {
        "converted_csv": {
            "sha256": _sha256_hex(converted),
            "encoding": TARGET_ENCODING,
            "content_b64": base64.b64encode(converted).decode("ascii"),
        },
        "report": report,
    }


def convert_file(input_path: str | Path, output_path: str | Path, label: str = "") -> Dict[str, Any]:
    """
    Convert a file on disk.

    Raises ConversionError before any row is processed if the input cannot
    be read or the output cannot be opened for writing.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        raw = input_path.read_bytes()
    except OSError as e:
        raise ConversionError(f"cannot open input file: {input_path}") from e

    try:
        out = output_path.open("wb")
    except OSError as e:
        raise ConversionError(f"cannot open output file: {output_path}") from e

    with out:
        text, decoding = decode_input(raw)
        output, report = convert_text(text, label)
        out.write(output.encode(TARGET_ENCODING))

    report["decoding"] = decoding
    logger.debug("wrote %d rows to %s", report["summary"]["rows_processed"], output_path)
    return report
