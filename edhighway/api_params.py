"""Request descriptions for the EDSM and Spansh web APIs."""

from __future__ import annotations

from .point import Point, format_float


class _Request:
    """Common shape: endpoint name, parameters and whether a job follows."""

    api: str = ""
    is_get: bool = True
    has_job: bool = False

    def __init__(self) -> None:
        self._params: dict[str, str] = {}

    @property
    def params(self) -> dict[str, str]:
        return dict(self._params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api={self.api!r}, params={self._params!r})"


class EDSMNearestSystems(_Request):
    """Find systems in a sphere or cube around a point or a named system."""

    def __init__(self, origin: Point | str, size_or_radius: float, is_cube: bool = False):
        super().__init__()
        self.is_cube = is_cube
        self.api = "cube-systems" if is_cube else "sphere-systems"
        if isinstance(origin, Point):
            self._params.update(origin.to_params())
        else:
            self._params["systemName"] = origin
        size = format_float(size_or_radius)
        if is_cube:
            self._params["size"] = size
        else:
            self._params["radius"] = size
            self._params["minRadius"] = "0"


class EDSMSysInfo(_Request):
    """Information about one system, with coordinates and primary star."""

    api = "system"

    def __init__(self, name: str):
        super().__init__()
        self._params.update(
            systemName=name,
            showCoordinates="1",
            showPermit="1",
            showInformation="1",
            showPrimaryStar="1",
        )


class EDSMSysBodies(_Request):
    """Bodies of one system."""

    api = "https://www.edsm.net/api-system-v1/bodies"

    def __init__(self, name: str):
        super().__init__()
        self._params["systemName"] = name


class SpanshRoutePostData(_Request):
    """Neutron route plotting request; the result is fetched as a job."""

    api = "route"
    is_get = False
    has_job = True

    def __init__(self, efficiency: int, jump_range: float, origin: str, destination: str):
        super().__init__()
        if not 0 <= int(efficiency) < 2**32:
            raise ValueError(f"efficiency out of range: {efficiency}")
        self._params.update(
            efficiency=str(int(efficiency)),
            range="%02f" % jump_range,
        )
        self._params["from"] = origin
        self._params["to"] = destination


class SpanshSysName(_Request):
    """System name completion request."""

    api = "systems"
    is_get = False
    has_job = False

    def __init__(self, template: str):
        super().__init__()
        self._params["q"] = template