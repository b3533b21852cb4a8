#
# src/makego/cli/__init__.py
#
