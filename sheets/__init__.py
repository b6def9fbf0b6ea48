"""
sheets/ - Row Source Layer
==========================
Fetches raw subscription rows from the Google Sheets API.
This layer is the lowest in the architecture and knows nothing about
frequencies or dates; it only returns the cell values as strings.
"""
