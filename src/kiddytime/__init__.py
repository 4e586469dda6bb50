"""KiddyTime package.

Daily attendance tracking for a small childcare. The package is organized by
feature modules (children, entries, users, ...) with a thin Flask controller
layer on top of service/repository layers backed by flat JSON files.
"""
