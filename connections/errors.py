from typing import Any, Optional


class RelayError(Exception):
    """Base for every failure the relay turns into an HTTP response."""

    status_code = 500
    message = "An internal server error occurred."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail


class InvalidInput(RelayError):
    status_code = 400
    message = "A valid 'userPrompt' is required in the request body."


class MethodNotAllowed(RelayError):
    status_code = 405
    message = "Method Not Allowed"


class MissingConfiguration(RelayError):
    status_code = 500
    message = "Server configuration error: API keys not loaded."

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Check environment variables: {', '.join(self.missing)}")


class UpstreamFailure(RelayError):
    """A non-success answer from Supabase or Gemini."""

    status_code = 500
    prefixes = {
        "supabase": "Supabase fetch failed",
        "gemini": "Gemini API call failed",
    }

    def __init__(
        self,
        service: str,
        upstream_message: str,
        status: Optional[int] = None,
        payload: Any = None,
    ):
        self.service = service
        self.upstream_message = upstream_message
        self.status = status
        self.payload = payload
        prefix = self.prefixes.get(service, f"{service} call failed")
        super().__init__(f"{prefix}: {upstream_message}")
