"""
Report Assembler Module
=======================

Uniform footer and empty-state handling for generated Markdown reports.
"""


class ReportAssembler:
    """
    Static utility class for assembling final markdown reports.
    """

    @staticmethod
    def get_disclaimer() -> str:
        """Returns the standardized disclaimer text."""
        return """

---

### Disclaimer

This report is generated automatically from company filings and is for informational and educational purposes only. It does not constitute financial product advice. Extracted figures may contain errors; verify against the original filings before relying on them. Past performance is not a reliable indicator of future performance.
"""

    @staticmethod
    def assemble_macro_report(markdown_content: str) -> str:
        """
        Assemble a complete Macro Trends Report.

        Structure:
        1. Generated Markdown Dashboard
        2. Disclaimer
        """
        components = []

        if markdown_content:
            components.append(markdown_content.strip())
        else:
            components.append("# Macro Trends Report (Generation Failed)\n\n> [!WARNING]\n> No report content was generated.")

        components.append(ReportAssembler.get_disclaimer())

        return "\n".join(components)
