"""Daily attendance sheet initializer.

The package is organized by feature modules (schedules, students, attendance,
sheets, ...) with thin adapters around MySQL and blob storage and a single
pipeline that wires them into one daily run.
"""
