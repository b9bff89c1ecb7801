"""
Fixed conversion rules.

The input is a form-collection export with a known column order; the output
is a contact-import CSV with a fixed 23-column header. Nothing here is
negotiated at runtime.
"""

TARGET_ENCODING = "utf-8-sig"  # UTF-8 with BOM
OUTPUT_DELIMITER = ","
OUTPUT_NEWLINE = "\n"

OUTPUT_COLUMNS = (
    "First Name",
    "Middle Name",
    "Last Name",
    "Phonetic First Name",
    "Phonetic Middle Name",
    "Phonetic Last Name",
    "Name Prefix",
    "Name Suffix",
    "Nickname",
    "File As",
    "Organization Name",
    "Organization Title",
    "Organization Department",
    "Birthday",
    "Notes",
    "Photo",
    "Labels",
    "E-mail 1 - Label",
    "E-mail 1 - Value",
    "E-mail 2 - Label",
    "E-mail 2 - Value",
    "Phone 1 - Label",
    "Phone 1 - Value",
)
NUM_OUTPUT_COLUMNS = len(OUTPUT_COLUMNS)
OUTPUT_HEADER = OUTPUT_DELIMITER.join(OUTPUT_COLUMNS)

# Output positions that are filled; everything else stays empty.
OUT_FIRST_NAME = 0
OUT_LAST_NAME = 2
OUT_LABELS = 16
OUT_EMAIL_1 = 18
OUT_EMAIL_2 = 20
OUT_PHONE_1 = 22

# Input positions (0-based). Column 0 is the form timestamp.
IN_ROLE = 1  # not written
IN_FIRST_NAME = 2
IN_GROUP_LAST_NAME = 3  # e.g. "ПМ-35 ПОНОМАРЕВ"
IN_EMAIL_LOGIN = 4  # personal account login
IN_EMAIL_CREATED = 5  # provisioned mailbox
IN_PHONE = 6
MIN_INPUT_FIELDS = 7

DEFAULT_INPUT_FILENAME = "input.csv"
DEFAULT_OUTPUT_FILENAME = "output.csv"
