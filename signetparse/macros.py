"""
Macros are caller-supplied text rewrites which run before structural parsing.

Type-level macros see each type token; signature-level macros see the whole
signature. Within each chain they run in the order registered, each one getting
the previous one's output. The registry only ever grows: there is no removal,
no de-duplication and no re-ordering.
"""

from typing import Callable

from .support.interfaces import MacroError

Macro = Callable[[str], str]

def _apply(chain:list[Macro], text:str) -> str:
	for macro in chain:
		text = macro(text)
		if not isinstance(text, str): raise MacroError(text, macro)
	return text

class MacroRegistry:
	def __init__(self):
		self.__type_level = []
		self.__signature_level = []

	@staticmethod
	def __check(macro):
		if not callable(macro): raise TypeError("A macro must be callable; got %r"%(macro,))

	def register_type_level_macro(self, macro:Macro):
		self.__check(macro)
		self.__type_level.append(macro)

	def register_signature_level_macro(self, macro:Macro):
		self.__check(macro)
		self.__signature_level.append(macro)

	def apply_type_level(self, text:str) -> str: return _apply(self.__type_level, text)
	def apply_signature_level(self, text:str) -> str: return _apply(self.__signature_level, text)

	def type_level(self) -> tuple: return tuple(self.__type_level)
	def signature_level(self) -> tuple: return tuple(self.__signature_level)
