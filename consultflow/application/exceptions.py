"""Error taxonomy for the reporting core."""


class ConsultFlowError(RuntimeError):
    """Base error raised by ConsultFlow adapters."""


class DataUnavailableError(ConsultFlowError):
    """Raised when report data cannot be fetched from a backing store."""


class LedgerFetchError(ConsultFlowError):
    """Raised when the general ledger cannot be queried."""


__all__ = ["ConsultFlowError", "DataUnavailableError", "LedgerFetchError"]
