"""Use-case layer for nursery staff workflows.

Each module coordinates domain objects and ports without performing transport
I/O directly, and converts adapter failures into ``UseCaseError``.
"""
