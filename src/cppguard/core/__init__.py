# cppguard:header:start
#
#   project      : CppGuard
#   file         : __init__.py
#   file_relpath : src/cppguard/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Core building blocks shared across CppGuard (diagnostics)."""
