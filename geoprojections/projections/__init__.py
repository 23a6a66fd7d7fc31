
from geoprojections.projections.azimuthal_equidistant import (
    AzimuthalEquidistant, AzimuthalEquidistantBuilder
)
from geoprojections.projections.equidistant_cylindrical import (
    EquidistantCylindrical, EquidistantCylindricalBuilder
)
from geoprojections.projections.lambert_conformal_conic import (
    LambertConformalConic, LambertConformalConicBuilder
)
from geoprojections.projections.lon_lat import LongitudeLatitude
from geoprojections.projections.modified_azimuthal_equidistant import (
    ModifiedAzimuthalEquidistant, ModifiedAzimuthalEquidistantBuilder
)
from geoprojections.projections.oblique_lon_lat import ObliqueLonLat, ObliqueLonLatBuilder

__all__ = [
    'AzimuthalEquidistant',
    'AzimuthalEquidistantBuilder',
    'EquidistantCylindrical',
    'EquidistantCylindricalBuilder',
    'LambertConformalConic',
    'LambertConformalConicBuilder',
    'LongitudeLatitude',
    'ModifiedAzimuthalEquidistant',
    'ModifiedAzimuthalEquidistantBuilder',
    'ObliqueLonLat',
    'ObliqueLonLatBuilder',
]
