# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
