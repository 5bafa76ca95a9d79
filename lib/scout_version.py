from importlib import metadata


class ScoutVersion:
    """
    Scout Version - Reads the version of the installed pyscout distribution.
    """
    @staticmethod
    def get_version():
        try:
            return metadata.version("pyscout")
        except metadata.PackageNotFoundError as e:
            raise RuntimeError("Can't find the installed pyscout distribution.") from e


SCOUT_VERSION = ScoutVersion.get_version()

if __name__ == "__main__":
    print(f"Scout Version: {SCOUT_VERSION}")
