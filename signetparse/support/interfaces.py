"""
This file aggregates the exception types which signetparse deals in, along with
a few design constants shared by the scanner and the parsers.

Every failure that can arise from the text of a signature (or from a macro that
rewrites such text) is a SignatureError, which is in turn a ValueError. Callers
who only care that "the input was bad" can catch the base class; callers who want
to point at the trouble can look at the extra attributes on the subclasses.
"""

ARROW = '=>' # Separates the stages of a signature.
DOUBLE_COLON = '::' # Separates dependent metadata from a parameter list.
ESCAPE = '%' # Takes the very next character literally.
NO_OUTPUT = "Signature must contain an output declaration"

class SignatureError(ValueError):
	""" Base class of all exceptions arising from the signature grammar. """

class MacroError(SignatureError):
	"""
	Raised as soon as a registered macro returns something other than a string.
	Parameters are:
		the offending value;
		the macro which produced it.
	"""
	def __init__(self, value, macro=None):
		message = "Macro Error: All macros must return a string; got %r of type %s"%(value, type(value).__name__)
		super().__init__(message)
		self.value, self.macro = value, macro

class MalformedSignature(SignatureError):
	""" The overall shape of a signature is wrong. `text` is what was being parsed. """
	def __init__(self, message, text):
		super().__init__(message)
		self.text = text

class MalformedConstraint(SignatureError):
	"""
	A dependent-metadata constraint did not come out as exactly three tokens.
	Parameters are:
		the text of the metadata block;
		the string offset (within that block) where the bad constraint starts;
		the text of the bad constraint;
		the offset of the block itself within the whole signature.
	"""
	def __init__(self, text, position, piece, origin=0):
		message = "Dependent constraint %r must read 'left operator right'"%piece.strip()
		super().__init__(message)
		self.text, self.position, self.piece, self.origin = text, position, piece, origin

	def slice(self):
		""" Where the bad constraint sits in the whole signature, less surrounding whitespace. """
		start = self.origin + self.position + len(self.piece) - len(self.piece.lstrip())
		return slice(start, start+len(self.piece.strip()))

class MalformedType(SignatureError):
	""" A base type name with a bare `;` or `,` in it. `text` is the type token. """
	def __init__(self, message, text):
		super().__init__(message)
		self.text = text
