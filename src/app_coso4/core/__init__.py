"""Core property tables and services for the CoSO4 evaporation train"""

from app_coso4.core.bpr import boiling_point_rise
from app_coso4.core.density import DensityTable, get_density_table
from app_coso4.core.errors import TableIntegrityError, TableRangeError
from app_coso4.core.props_service import PropsService, get_props_service
from app_coso4.core.saturation import SaturationTable, get_saturation_table

__all__ = [
    "boiling_point_rise",
    "DensityTable",
    "get_density_table",
    "SaturationTable",
    "get_saturation_table",
    "PropsService",
    "get_props_service",
    "TableRangeError",
    "TableIntegrityError",
]
