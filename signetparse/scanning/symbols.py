"""
The lowest level of the signature machinery: walk a string one symbol at a time.

A "symbol" is usually a single character, but a few two-character sequences
must be seen as a unit so that the splitter never tears them apart:

	=>  the arrow between stages of a signature,
	::  the separator after a dependent-metadata block,
	%c  an escape: the character c is to be taken literally.

Alongside the cursor, the scanner keeps track of angle-bracket depth. The
double-colon resets that depth to zero, because dependent metadata always
closes whatever generic context came before it.
"""

from typing import Optional

from ..support.interfaces import ARROW, DOUBLE_COLON, ESCAPE

SEQUENCE_LEADERS = {'=', ESCAPE, ':'}

def is_escape(symbol:str) -> bool:
	return len(symbol) == 2 and symbol[0] == ESCAPE

def _pair_at(text:str, cursor:int) -> Optional[str]:
	"""
	If a recognized two-character symbol starts at the cursor, return it.
	Anything after a `%` counts; the other leaders need a specific partner.
	"""
	pair = text[cursor:cursor+2]
	if len(pair) < 2: return None
	if pair[0] == ESCAPE or pair in (ARROW, DOUBLE_COLON): return pair
	return None

class SymbolScanner:
	"""
	A cursor over some text which yields one symbol per call to `next_symbol()`.
	After each call, `left` and `right` delimit the symbol within the text,
	and `depth` reflects the bracket nesting *after* that symbol.
	"""

	depth : int

	def __init__(self, text:str, at=0):
		self.__text = text
		self.__size = len(text)
		self.left = self.right = at
		self.depth = 0

	def has_more(self):
		return self.right < self.__size

	def next_symbol(self) -> str:
		cursor = self.left = self.right
		symbol = None
		if self.__text[cursor] in SEQUENCE_LEADERS: symbol = _pair_at(self.__text, cursor)
		if symbol is None: symbol = self.__text[cursor]
		self.right = cursor + len(symbol)
		self.__track(symbol)
		return symbol

	def __track(self, symbol):
		if symbol == '<': self.depth += 1
		elif symbol == '>': self.depth = max(0, self.depth - 1)
		elif symbol == DOUBLE_COLON: self.depth = 0

	def slice(self):
		""" Return a slice-object corresponding to the extent of the most recent symbol. """
		return slice(self.left, self.right)

	def __iter__(self):
		while self.has_more():
			yield self.next_symbol()
