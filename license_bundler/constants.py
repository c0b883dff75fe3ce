"""Constants for license-bundler."""

# Exit codes
EXIT_SUCCESS = 0  # Bundle generated without issues
EXIT_ISSUES = 1  # Bundle generated, but licenses are missing or low quality
EXIT_ERROR = 2  # Bundle generation failed due to error

# Provisional: distance/length ratio below which a text matches its template
DEFAULT_MAX_DISTANCE_RATIO = 0.1

# File names (compared upper-cased) that may carry any license text
GENERIC_LICENSE_NAMES = ("LICENSE", "LICENSE.MD", "LICENSE.TXT")

# Indentation applied to every license text line in the bundle
TEXT_INDENT = "    "

# Separator between the texts of a package with multiple licenses
LICENSE_SEPARATOR = "    ==============="

MISSING_LICENSE_MESSAGE = """\
  We failed to recognise a license in one or more packages.

  Please check the corresponding package directories (see the package
  specific message above) to see if there is an easily recognisable
  license file available.

  If there is, please report it so this license can be recognised in
  the future.

  If there isn't, you could ask the package's project to include the
  text of their license in the built distributions."""

LOW_QUALITY_LICENSE_MESSAGE = (
    "  We are very unsure about one or more licenses that were put into the "
    "bundle. Please check the specific error messages above."
)

BUNDLE_FAILED_MESSAGE = "Generating bundle finished with error(s)"
