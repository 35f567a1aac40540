"""Ten-pin bowling scorekeeping core."""
