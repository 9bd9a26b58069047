"""Language front end: grammars and the document parser."""
