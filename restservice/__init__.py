"""
restservice: In-Memory REST Key-Value Service

A small HTTP key-value service built on FastAPI and uvicorn. Values are
stored in process memory behind a readers-writer lock and addressed by
string keys over a handful of RESTful routes.
"""

__version__ = "1.0.0"
