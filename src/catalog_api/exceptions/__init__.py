# catalog_api/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                    # App-level errors (RepositoryError, DuplicateError, InvalidReferenceError, auth errors)
# │   ├── integrity_classifier.py    # SQL-level / DB-specific errors
# │   └── mapper.py                  # Map SQL-level / DB-specific errors to app-level errors
