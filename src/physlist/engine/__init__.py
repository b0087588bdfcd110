from physlist.engine.recording import EngineCall, RecordingEngine

__all__ = ["EngineCall", "RecordingEngine"]
