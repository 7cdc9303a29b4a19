""" Bits and bobs in support of visualizing parsed signatures. """

from .structures import TypeDescriptor, ParameterList, Signature

INDENT = '    '

def format_type(descriptor:TypeDescriptor) -> str:
	"""
	Render a descriptor back into grammar text. Subtypes come out joined by `;`,
	so `tuple<a,b>` comes back as `tuple<a;b>`, which parses the same.
	Escapes resolved during extraction are not restored.
	"""
	text = descriptor.type
	if descriptor.subtype: text += '<%s>'%';'.join(descriptor.subtype)
	if descriptor.optional: text = '[%s]'%text
	if descriptor.name is not None: text = descriptor.name + ':' + text
	return text

def format_params(params:ParameterList) -> str:
	text = ', '.join(map(format_type, params))
	if params.dependent is not None:
		metadata = ', '.join(' '.join(c) for c in params.dependent)
		text = metadata + ' :: ' + text
	return text

def format_signature(signature:Signature) -> str:
	return ' => '.join(map(format_params, signature))

def tree_lines(signature:Signature):
	last = len(signature) - 1
	for i, stage in enumerate(signature):
		yield 'output' if i == last and i else 'stage %d'%i
		if stage.dependent is not None:
			yield INDENT + 'where ' + ', '.join(' '.join(c) for c in stage.dependent)
		for descriptor in stage:
			label = descriptor.type if descriptor.name is None else '%s: %s'%(descriptor.name, descriptor.type)
			if descriptor.optional: label += ' (optional)'
			yield INDENT + label
			for sub in descriptor.subtype: yield INDENT*2 + sub

def print_tree(signature:Signature):
	for line in tree_lines(signature): print(line)
