from onecopy.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha256": HashAlgorithmName.SHA256,
    "blake2b": HashAlgorithmName.BLAKE2B,
    "xxh128": HashAlgorithmName.XXH128,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest used to compare files:\n"
    + "".join(f"  {alias:<10} : {name.description}\n" for alias, name in ALGORITHM_ALIASES.items())
    + "Example    : %(prog)s -i ~/Downloads --algorithm blake2b\n"
)

EPILOG_TEXT = """
Examples:
  Report duplicates in the Downloads folder
  %(prog)s -i ~/Downloads

  Ask for the path on standard input
  %(prog)s

  Report duplicates, then ask whether to delete them
  %(prog)s -i ~/Downloads --delete

  Delete without confirmation, moving files to the trash (for scripts)
  %(prog)s -i ~/Downloads --delete --yes --trash > ~/Downloads/report.txt

  Limit the hashing pool to 4 threads
  %(prog)s -i ~/Downloads -w 4
"""
