"""modules/calendar: trip day expansion, day keys and labels."""
