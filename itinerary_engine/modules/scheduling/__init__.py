"""modules/scheduling: time codec, time picker and the event scheduler."""
