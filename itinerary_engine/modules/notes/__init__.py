"""modules/notes: reference links embedded in event descriptions."""
