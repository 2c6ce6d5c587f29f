"""Shared exception taxonomy.

Every domain exception inherits from ``PipelineError`` and carries
structured context so the ingestion caller can decide whether to skip,
quarantine, retry, or abort a batch without parsing message strings.

Taxonomy categories
-------------------
- ``ValidationError``   — the product XML cannot become a feature. Never retryable.
- ``TransientError``    — the feature store was unreachable. Retryable.
- ``PermanentError``    — the feature store refused the record. Not retryable.
- ``ContractError``     — extracted properties drifted from the record model.

The category and the retry default are class attributes; a subclass
picks its place in the taxonomy by inheriting from one of the four.
``to_error_dict()`` returns a stable payload for logs and ingestion reports.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all extraction-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (``"extract_metadata"``, ``"store_feature"`` or ``"config"``).
        code: Machine-readable error code (e.g. ``"XML_MALFORMED"``).
        retryable: Whether the ingestion caller may submit the item again.
        correlation_id: Caller-supplied identifier for the item being ingested.
    """

    default_stage: str = ""
    default_code: str = ""
    default_retryable: bool = False
    #: Fixed category of the subclass; empty means "derive from retryable".
    category_name: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool | None = None,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = self.default_retryable if retryable is None else retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the taxonomy category of this error."""
        if self.category_name:
            return self.category_name
        return "transient" if self.retryable else "permanent"

    def attach_correlation_id(self, correlation_id: str) -> None:
        """Tag the error with the item identifier unless it already has one."""
        if correlation_id and not self.correlation_id:
            self.correlation_id = correlation_id

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PipelineError):
    """Malformed or incomplete product XML."""

    category_name = "validation"


class TransientError(PipelineError):
    """Collaborator failure that may succeed on retry."""

    category_name = "transient"
    default_retryable = True


class PermanentError(PipelineError):
    """Collaborator refusal that will not change on retry."""

    category_name = "permanent"


class ContractError(PipelineError):
    """Assembled record does not match the record model."""

    category_name = "contract"
