"""Services — imperative shell around the DKI core (logging, typed errors)."""
