"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shape exchanged over HTTP and the records
handed to and returned by the repositories.  Field constraints are not
declared here; they are checked explicitly by the service layer so
that every violation can be reported with its Spanish message.
"""
