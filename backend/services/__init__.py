"""
Services that run alongside the engine: the tick driver and the history recorder.
"""
