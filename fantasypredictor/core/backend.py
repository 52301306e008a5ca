"""Exceptions raised by the hosted backend client libraries."""

from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPICallError

# Anything Firebase Auth or Firestore can raise for a failed call.
BACKEND_ERRORS = (FirebaseError, GoogleAPICallError)
