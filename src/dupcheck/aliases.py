CROSS_HELP_TEXT = (
    "Cross check across directories only:\n"
    "  files within the same directory are never compared.\n"
    "  Requires at least two directories."
)

CHUNK_SIZE_HELP_TEXT = (
    "Bytes read from each file per comparison step (e.g., 64K, 1M).\n"
    "Peak memory per comparison is twice this value. Default: 1M"
)

DESCRIPTION_TEXT = (
    "Find duplicate files in the given directories and optionally delete them.\n\n"
    "Only files of the same size are read. They are compared byte for byte and,\n"
    "once all pairs are checked, a table of duplicates and the files they matched\n"
    "is shown before anything is deleted."
)

EPILOG_TEXT = """
Examples:
  Find duplicates inside one folder
  %(prog)s ~/Downloads

  Find duplicates inside and across several folders, including subfolders
  %(prog)s -r ~/Photos ~/Backup/Photos

  Only report files of the second folder that already exist in the first
  %(prog)s -x ~/Photos ~/Backup/Photos

  Same as above, move duplicates to trash without asking (for scripts)
  %(prog)s -x --trash --yes ~/Photos ~/Backup/Photos
"""
