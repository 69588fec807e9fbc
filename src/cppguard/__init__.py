# cppguard:header:start
#
#   project      : CppGuard
#   file         : __init__.py
#   file_relpath : src/cppguard/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""CppGuard package.

CppGuard walks a source tree, finds C/C++ header files and makes sure each one
wraps its declarations in ``extern "C"`` linkage guards for C++ consumers,
inserting the guards where they are missing.
"""

from __future__ import annotations
