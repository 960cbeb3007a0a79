from .report_assembler import ReportAssembler

__all__ = ['ReportAssembler']
