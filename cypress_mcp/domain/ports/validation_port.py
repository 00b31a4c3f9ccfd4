from abc import ABC, abstractmethod

from cypress_mcp.domain.value_objects.validation_report import ValidationReport


class ValidationStrategy(ABC):
    """Port for checking Cypress test source before it is run."""

    @abstractmethod
    def validate(self, source: str) -> ValidationReport:
        """Inspect test source and return errors and warnings."""
