from importlib.metadata import PackageNotFoundError, version

try:
    version = version("BifrostIO")
except PackageNotFoundError:
    version = "0.0.0"
