from cv_upload.extraction.base import BaseTextExtractor


class PlainTextExtractor(BaseTextExtractor):
    """Decodes a text payload as UTF-8, verbatim.

    Undecodable bytes become U+FFFD rather than failing the upload.
    """

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8-sig", errors="replace")
