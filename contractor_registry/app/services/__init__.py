"""
Service layer abstraction.

The contractor store owns the data and its persistence; the view and
export services are pure functions over the records it returns, so API
handlers never manipulate the contractor list directly.
"""
