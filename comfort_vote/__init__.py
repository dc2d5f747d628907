"""Single-process comfort voting service."""
