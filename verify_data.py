from loguru import logger

from exercise_catalog.data_loader import CatalogLoader
from exercise_catalog.grouping import index_by_group
from exercise_catalog.csv_parser import FormatError
from exercise_catalog.const import GROUP_ORDER

def verify():
    print("Initializing CatalogLoader...")
    loader = CatalogLoader()

    print("Loading catalog...")
    try:
        exercises = loader.load_all()
    except (FileNotFoundError, FormatError) as e:
        logger.error(f"FAILED to load catalog: {e}")
        return False

    if not exercises:
        logger.error("FAILED: catalog is empty!")
        return False

    view = index_by_group(exercises, GROUP_ORDER)

    print("\n--- Catalog Summary ---")
    print(f"Total Exercises: {len(exercises)}")
    print(f"Total Targets: {len(loader.target_data)}")
    print(f"Visible Groups: {', '.join(view.order)}")

    print("\n--- Group Verification ---")
    for group in view.order:
        names = [e.name for e in view.groups[group]]
        print(f"{group}: {len(names)} exercises")
        assert names == sorted(names), f"Group '{group}' is not sorted by name!"

    extras = [g for g in view.order if g not in GROUP_ORDER]
    if extras:
        print(f"Groups outside the default order: {', '.join(extras)}")

    ungrouped = [e.name for e in exercises if not e.targets]
    if ungrouped:
        print(f"WARNING: {len(ungrouped)} exercises have no muscle group.")
        print(f"Sample: {ungrouped[:5]}")
    else:
        print("SUCCESS: All exercises mapped to a muscle group.")
    return True

if __name__ == "__main__":
    verify()
