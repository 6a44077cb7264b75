"""Export readiness classification engine.

Pure, synchronous and side-effect free. Entry point is
app.readiness_engine.service.classify_export_readiness.
"""
