"""Edit a scratch file in a terminal and copy the result to the clipboard."""
