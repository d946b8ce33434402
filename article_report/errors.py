"""
Exception taxonomy for the article report pipeline.

Every error raised by a pipeline stage derives from ReportError and carries
the name of the stage it originated in, so the CLI can print a diagnostic
like ``Error [summarize]: ...`` before exiting non-zero.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base class for all pipeline failures."""

    stage = "pipeline"


class MissingApiKey(ReportError):
    """No credential was configured for the summarization service."""

    stage = "config"


class FetchError(ReportError):
    """The page could not be fetched or its body could not be read."""

    stage = "fetch"


class ExtractionNotFound(ReportError):
    """The title heading or the body container is absent from the markup."""

    stage = "extract"


class InvalidFilename(ReportError):
    """The article title cannot be used as a filename and was not corrected."""

    stage = "title"


class SummarizationError(ReportError):
    """Base class for failures talking to the summarization service."""

    stage = "summarize"


class ServiceUnavailable(SummarizationError):
    """The request never produced a response (connection, timeout, ...)."""


class RemoteError(SummarizationError):
    """The service answered with a structured error envelope."""

    def __init__(
        self,
        message: str,
        type: str = "",
        code: str = "",
        failed_generation: str = "",
    ):
        self.message = message
        self.type = type
        self.code = code
        self.failed_generation = failed_generation
        super().__init__(
            f"API error: {message} (Type: {type}, Code: {code}, "
            f"Failed Generation: {failed_generation})"
        )


class ProtocolError(SummarizationError):
    """The response body does not match the chat-completion envelope."""


class EmptyResponse(SummarizationError):
    """The response envelope contained no choices."""


class MalformedSummary(SummarizationError):
    """The embedded message content is not a valid summary object."""


class IncompleteArticle(ReportError):
    """The article is missing fields required for export."""

    stage = "export"

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"article is incomplete, missing: {', '.join(missing)}")


class ExportError(ReportError):
    """The note template could not be rendered or the file not written."""

    stage = "export"
