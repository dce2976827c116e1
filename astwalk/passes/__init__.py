from astwalk.passes.recording import KindRecorder, MaxDepthMeter, NodeCounter
from astwalk.passes.symbols import CallCollector, FunctionIndex, VariableCollector

__all__ = [
    "KindRecorder",
    "MaxDepthMeter",
    "NodeCounter",
    "CallCollector",
    "FunctionIndex",
    "VariableCollector",
]
