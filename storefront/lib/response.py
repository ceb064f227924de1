from storefront.lib.logger import log as logger


class Response:
    """JSON envelope shared by every endpoint: ``{ok, error?, message?, data?}``."""

    def __init__(self, ok=True, error=None, message="", data=None, status=200, **extra):
        try:
            self.ok = ok
            self.error = error
            self.message = message
            self.data = data
            self.status = status
            self.extra = extra
        except Exception as e:
            logger.error(f"Error in Response __init__: {e}")
            self.ok = False
            self.error = "Internal Server Error"
            self.message = ""
            self.data = None
            self.status = 500
            self.extra = {}

    def to_dict(self):
        body = {"ok": self.ok}
        if self.error is not None:
            body["error"] = self.error
        if self.message:
            body["message"] = self.message
        if self.data is not None:
            body["data"] = self.data
        body.update(self.extra)
        return body, self.status
