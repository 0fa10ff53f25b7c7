from pathlib import Path

from loguru import logger

from .const import DATA_DIR, CATALOG_FILE
from .csv_parser import FormatError, parse_catalog
from .grouping import catalog_frame


class CatalogLoader:
    def __init__(self, data_dir=DATA_DIR, filename=CATALOG_FILE):
        self.data_dir = Path(data_dir)
        self.filename = filename
        self.exercises = None
        self.target_data = None

    @property
    def catalog_path(self):
        return self.data_dir / self.filename

    def load_all(self):
        """Loads the catalog file and builds the per-target table."""
        self.load_exercises(self.catalog_path)
        self.process_data()
        return self.exercises

    def load_exercises(self, csv_path):
        csv_path = Path(csv_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"Exercise catalog not found at {csv_path}")

        # utf-8-sig drops a leading BOM left by spreadsheet exports
        raw = csv_path.read_text(encoding='utf-8-sig')
        try:
            self.exercises = parse_catalog(raw)
        except FormatError as e:
            logger.error(f"catalog.load_failed path={csv_path} detail={e}")
            raise

        logger.info(f"catalog.loaded path={csv_path} exercises={len(self.exercises)}")

    def process_data(self):
        """Builds the long-form exercise/target table used by the charts."""
        if self.exercises is None:
            return

        untargeted = [e.name for e in self.exercises if not e.targets]
        if untargeted:
            logger.warning(f"catalog.no_targets count={len(untargeted)} sample={untargeted[:5]}")

        self.target_data = catalog_frame(self.exercises)
