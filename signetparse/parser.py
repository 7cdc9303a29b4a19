"""
The front door. A Parser owns its macro registry and its memos, so two parsers
never influence each other. If an application wants one process-wide parser,
it's welcome to make one and share it around.

	>>> p = Parser()
	>>> p.parse_type('array<int>')
	TypeDescriptor(name=None, type='array', subtype=['int'], optional=False)
"""

from .macros import MacroRegistry, Macro
from .parsing import typetoken, signature
from .support.memo import Memo
from .support.structures import TypeDescriptor, ParameterList, Signature

class Parser:
	def __init__(self, *, memoize=True, strict=True):
		self.macros = MacroRegistry()
		self.strict = strict
		self.__memos = []
		self.__parse_token = self.__memoized(typetoken.parse_type, memoize, 'type')
		self.__parse_signature = self.__memoized(self.__structure, memoize, 'signature')

	def __memoized(self, function, memoize, name):
		if not memoize: return function
		memo = Memo(function, name)
		self.__memos.append(memo)
		return memo

	def __structure(self, text:str) -> Signature:
		return signature.parse_signature(text, self.parse_type, strict=self.strict)

	def clear_memos(self):
		for memo in self.__memos: memo.clear()

	def register_type_level_macro(self, macro:Macro):
		self.macros.register_type_level_macro(macro)
		self.clear_memos()

	def register_signature_level_macro(self, macro:Macro):
		self.macros.register_signature_level_macro(macro)
		self.clear_memos()

	def parse_type(self, token:str) -> TypeDescriptor:
		return self.__parse_token(self.macros.apply_type_level(token))

	def parse_params(self, token:str) -> ParameterList:
		return signature.parse_params(token, self.parse_type)

	def parse_signature(self, text:str) -> Signature:
		return self.__parse_signature(self.macros.apply_signature_level(text))
