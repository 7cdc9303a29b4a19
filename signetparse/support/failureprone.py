"""
This module is all about easing over the process to display where things go wrong.

Signatures are short, and almost always a single line, so there's not much call
for row and column arithmetic. What does help is showing the offending text with
the troublesome part underlined. Given the text and a slice, `illustration` makes
a suitable picture for a text console, and `SourceText.complaint` wraps that up
with a message.
"""

import sys

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class SourceText:
	""" Wrapper for the text of a signature: participates in half-respectable error-display with context. """
	def __init__(self, content:str, label:str=None):
		self.content = content
		self.label = label

	def complaint(self, a_slice:slice, message:str) -> str:
		prefix = "In" if self.label is None else str(self.label)+":"
		reference = "%s column %d: %s"%(prefix, a_slice.start+1, message)
		illustrated = illustration(self.content, a_slice.start, a_slice.stop-a_slice.start, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)

	def complain(self, a_slice:slice, message:str):
		print(self.complaint(a_slice, message), file=sys.stderr)
