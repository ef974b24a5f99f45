"""Job Portal API."""
