# appointments/services/bookings/__init__.py
"""
Booking ledger (reads) and admission (writes).

Import the submodules directly; admission depends on the slots package,
which itself reads through the ledger.
"""
