
from geoprojections._version import __version__  # noqa: F401
from geoprojections.utils.logging import LOGGER
from geoprojections.ellipsoids import (
    AIRY1830, CLARKE1866, GRS67, GRS80, SPHERE, WGS60, WGS66, WGS72, WGS84, Ellipsoid
)
from geoprojections.errors import (
    IncorrectParams, InverseProjectionImpossible, ParamNotFinite, ParamOutOfRange,
    ParamRequired, ProjectionError, ProjectionImpossible
)
from geoprojections._base import Projection, ProjectionBuilder
from geoprojections.conversion import ConversionPipe
from geoprojections.projections import (
    AzimuthalEquidistant, AzimuthalEquidistantBuilder,
    EquidistantCylindrical, EquidistantCylindricalBuilder,
    LambertConformalConic, LambertConformalConicBuilder,
    LongitudeLatitude,
    ModifiedAzimuthalEquidistant, ModifiedAzimuthalEquidistantBuilder,
    ObliqueLonLat, ObliqueLonLatBuilder,
)
from geoprojections.batch import convert_batch, inverse_project_batch, project_batch

__all__ = [
    'AIRY1830',
    'CLARKE1866',
    'GRS67',
    'GRS80',
    'SPHERE',
    'WGS60',
    'WGS66',
    'WGS72',
    'WGS84',
    'AzimuthalEquidistant',
    'AzimuthalEquidistantBuilder',
    'ConversionPipe',
    'Ellipsoid',
    'EquidistantCylindrical',
    'EquidistantCylindricalBuilder',
    'IncorrectParams',
    'InverseProjectionImpossible',
    'LambertConformalConic',
    'LambertConformalConicBuilder',
    'LongitudeLatitude',
    'ModifiedAzimuthalEquidistant',
    'ModifiedAzimuthalEquidistantBuilder',
    'ObliqueLonLat',
    'ObliqueLonLatBuilder',
    'ParamNotFinite',
    'ParamOutOfRange',
    'ParamRequired',
    'Projection',
    'ProjectionBuilder',
    'ProjectionError',
    'ProjectionImpossible',
    'convert_batch',
    'inverse_project_batch',
    'project_batch',
    'LOGGER',
]
