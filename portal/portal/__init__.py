from importlib.metadata import PackageNotFoundError
from importlib.metadata import version


def get_package_version():
    package_version = ''

    try:
        package_version = version("mutation-portal")
    except PackageNotFoundError:
        pass

    return package_version


__version__ = get_package_version()
