#Renderer side of the pipeline. Consumes plain data only.

from .region import MapRegion, region_for
from .csv_renderer import CsvRenderer

__all__ = ["MapRegion", "region_for", "CsvRenderer"]
