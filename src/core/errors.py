# core/errors.py


class SceneBuildError(ValueError):
    """
    Raised while assembling a scene, camera or renderer from invalid
    parameters. Rendering itself never raises this.
    """
