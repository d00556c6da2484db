# 📄 File: membership/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The top-level folder of the membership service, which signs members up, turns their
# accounts on and off, and keeps their profile details up to date.
#
# 🧪 Purpose (Technical Summary):
# Root package for the membership service: a member aggregate with its lifecycle state
# machine, use-case handlers, repository/hashing/notification ports and their adapters.

__version__ = "1.0.0"
