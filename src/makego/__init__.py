#
# src/makego/__init__.py
#
"""
make-go: runs the Go toolchain's version, tidy, fmt and test commands
from the module root and prints a condensed test report.
"""

# 🔼⚙️
