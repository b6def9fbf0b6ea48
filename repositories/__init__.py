"""
repositories/ - Data Access Layer
==================================
Holds the subscription list produced by the last ingestion pass.
Repositories store and return domain model objects; they never fetch or
parse spreadsheet data themselves.
"""
