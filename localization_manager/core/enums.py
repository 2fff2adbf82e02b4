from enum import Enum

class ExtractionStage(Enum):
    """Extraction run stages."""
    IDLE = "idle"
    DISCOVERING = "discovering"
    EXTRACTING = "extracting"
    MERGING = "merging"
    SAVING = "saving"
    COMPLETED = "completed"
    ERROR = "error"
