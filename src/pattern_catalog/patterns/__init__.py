"""Design pattern demos grouped by family.

Every demo module exposes ``SUMMARY`` and a zero-argument ``run()`` that
returns the demo's output lines.
"""
