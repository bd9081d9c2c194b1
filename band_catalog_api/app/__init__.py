"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource (bands, songs) exposes a router defined in
``api/v1/endpoints`` and a service class in ``services``.  The
persistence layer lives in ``core/db.py`` and is handed to the
services explicitly, so tests can construct the application around a
store of their choice via ``create_app``.
"""
