"""Time-based supply issuance on a decaying annual inflation schedule."""
