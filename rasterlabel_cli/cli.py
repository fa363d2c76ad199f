import sys

import click

import rasterlabel

class Character(click.ParamType):
	"""A command line option type consisting of exactly one character."""
	name = 'char'
	def convert(self, value, param, ctx):
		if not isinstance(value, str) or len(value) != 1:
			self.fail(f"'{value}' is not a single character.")
		return value

HEADINGS = {
	4: "[Labeled image (Based on four neighborhoods)]",
	8: "[Labeled image (Based on eight neighborhoods)]",
}

@click.command()
@click.option('-n', "--connectivity", type=click.Choice(["4", "8", "both"]), default="both", help="Neighborhood used to connect foreground pixels.", show_default=True)
@click.option('-b', "--background", type=Character(), default=rasterlabel.util.BACKGROUND_CHARACTER, help="Character representing background pixels.", show_default=True)
@click.option('-f', "--foreground", type=Character(), default=rasterlabel.util.FOREGROUND_CHARACTER, help="Character representing foreground pixels.", show_default=True)
@click.option('-s', "--summary", default=False, is_flag=True, help="Print the image size and component counts instead of the images.", show_default=True)
@click.option("--save", "save", default=False, is_flag=True, help="Save each labeling next to its source as <source>.cc4.npy or <source>.cc8.npy. Ignored for stdin.", show_default=True)
@click.argument("source", nargs=-1)
def main(connectivity, background, foreground, summary, save, source):
	"""
	Label the connected components of binary text images.

	Each line of a SOURCE is one row of the image. Reads
	from stdin if no SOURCE is given or SOURCE is "-".
	"""
	if background == foreground:
		raise click.BadParameter("Background and foreground characters must differ.")

	if connectivity == "both":
		connectivities = [ 4, 8 ]
	else:
		connectivities = [ int(connectivity) ]

	if len(source) == 0:
		source = ("-",)

	failed = False
	for src in source:
		ok = label_file(
			src, connectivities,
			background, foreground,
			summary, save,
		)
		failed = failed or not ok

	if failed:
		sys.exit(1)

def read_binary(src, background, foreground):
	try:
		if src == "-":
			return rasterlabel.decode(sys.stdin.readlines(), background=background, foreground=foreground)
		return rasterlabel.load(src, background=background, foreground=foreground)
	except FileNotFoundError:
		print(f"rasterlabel: File \"{src}\" does not exist.")
	except (OSError, UnicodeDecodeError) as err:
		print(f"rasterlabel: {src}: {err}")
	except rasterlabel.DecodeError as err:
		print(f"rasterlabel: {src}: {err}")
	except rasterlabel.MalformedShapeError as err:
		print(f"rasterlabel: {src}: {err}")
	return None

def label_file(src, connectivities, background, foreground, summary, save) -> bool:
	binary = read_binary(src, background, foreground)
	if binary is None:
		return False

	ok = True
	print(rasterlabel.describe(binary))

	if not summary:
		print("\n[Binary image]")
		print(rasterlabel.render_binary(binary))

	for connectivity in connectivities:
		labels, N = rasterlabel.connected_components(
			binary, connectivity=connectivity, return_N=True
		)
		if summary:
			print(f"components ({connectivity}-connected): {N}")
		else:
			print(f"\n{HEADINGS[connectivity]}")
			print(rasterlabel.render_labels(labels))

		if save and src != "-":
			dest = f"{removesuffix(src, '.txt')}.cc{connectivity}.npy"
			try:
				rasterlabel.save(labels, dest)
			except OSError:
				print(f"rasterlabel: Unable to write {dest}.")
				ok = False

	return ok

def removesuffix(x:str, suffix:str) -> str:
  if x.endswith(suffix):
    x = x[:-len(suffix)]
  return x
