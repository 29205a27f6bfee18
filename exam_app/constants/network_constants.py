"""Network configuration constants for the exam client."""

API_BASE_URL: str = "https://otabek.alwaysdata.net"
VERIFY_PATH: str = "/verify"
QUESTIONS_PATH: str = "/tests"
SUBMIT_PATH: str = "/submit"

# Applies to verify, question fetch and submit alike.
REQUEST_TIMEOUT_SECONDS: float = 15.0

SUBMIT_FILE_FIELD: str = "file"
REPORT_MIME_TYPE: str = "application/pdf"
