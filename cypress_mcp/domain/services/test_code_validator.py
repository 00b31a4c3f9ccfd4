from cypress_mcp.domain.ports.validation_port import ValidationStrategy
from cypress_mcp.domain.value_objects.validation_report import ValidationReport

STRUCTURE_MARKERS = ("describe(", "it(", "cy.")

COMMON_COMMANDS = ("cy.visit", "cy.get", "cy.contains", "cy.click", "cy.type")

NO_STRUCTURE_WARNING = "No test structure found (describe/it)"
NO_COMMANDS_WARNING = "No common Cypress commands detected"


class HeuristicTestValidator(ValidationStrategy):
    """Substring heuristics over Cypress test source.

    Does not parse the code, so it only ever produces warnings. A real
    parser can be plugged in through ValidationStrategy.
    """

    __test__ = False

    def validate(self, source: str) -> ValidationReport:
        report = ValidationReport()

        if not any(marker in source for marker in STRUCTURE_MARKERS):
            report.warnings.append(NO_STRUCTURE_WARNING)

        if not any(command in source for command in COMMON_COMMANDS):
            report.warnings.append(NO_COMMANDS_WARNING)

        return report
