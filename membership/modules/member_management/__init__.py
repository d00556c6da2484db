# 📄 File: membership/modules/member_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# The member management module: signing members up, activating and deactivating their
# accounts, editing their profile details and looking them up.
# 🧪 Purpose (Technical Summary):
# Bounded context for the Member aggregate, laid out in domain / application /
# infrastructure layers with ports in the domain and adapters in infrastructure.

"""
Member Management Module

Layers:
- domain: Member aggregate, value objects, repository/hashing/notification ports
- application: commands, DTOs, command and query handlers (use cases)
- infrastructure: SQLAlchemy repository, passlib password hasher, logging notifier
"""
