"""Pure helper functions shared across activities."""
