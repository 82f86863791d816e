import argparse
import sys
from pathlib import Path

from cv_upload.config.settings import Settings
from cv_upload.extraction.models import SelectedFile
from cv_upload.logging.logger import Log
from cv_upload.session.models import SessionStatus
from cv_upload.session.state_machine import build_state_machine


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build state machine -> run one upload."""
    parser = argparse.ArgumentParser(
        description="Extract the text of a CV (PDF, DOCX or TXT) and submit it."
    )
    parser.add_argument("path", type=Path, help="file to upload")
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level)

    machine = build_state_machine(settings)
    try:
        machine.select_file(SelectedFile.from_path(args.path))
    finally:
        machine.close()

    snapshot = machine.snapshot
    if snapshot.status is SessionStatus.SUCCEEDED:
        Log.info(f"Uploaded {len(snapshot.extracted_text)} chars from '{snapshot.file_name}'")
        return 0
    Log.error(f"Upload failed: {snapshot.error_message}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
