"""
Idempotent seed script for the academic hierarchy.
Usage:
  python seed.py --reset     # drop + recreate the schema, then seed
  python seed.py             # fill in missing departments / years / sections only
Departments come from SEED_DEPARTMENTS of the active config (FLASK_CONFIG);
each gets years FIRST..FOURTH and sections A..D per year.
"""
import argparse
import logging

from app import create_app
from config import SECTION_NAMES
from extensions import db
from models import Department, Section, Year, YearLabel

log = logging.getLogger("seed")

def get_or_create(model, defaults=None, **by):
    """Find by the unique key ``by`` or insert it; returns (instance, created)."""
    inst = db.session.query(model).filter_by(**by).first()
    if inst:
        return inst, False
    data = dict(defaults or {})
    data.update(by)
    inst = model(**data)
    db.session.add(inst)
    db.session.flush()
    return inst, True

def seed_hierarchy(department_names) -> dict:
    counts = {"departments": 0, "years": 0, "sections": 0}
    for name in department_names:
        dept, created = get_or_create(Department, name=name)
        counts["departments"] += created
        for label in YearLabel:
            year, created = get_or_create(Year, year=label, department_id=dept.id)
            counts["years"] += created
            for section_name in SECTION_NAMES:
                _, created = get_or_create(Section, name=section_name, year_id=year.id, department_id=dept.id)
                counts["sections"] += created
    db.session.commit()
    return counts

def main():
    logging.basicConfig(level=logging.INFO, format="[seed] %(message)s")
    parser = argparse.ArgumentParser()
    parser.add_argument("--reset", action="store_true", help="drop + create + seed")
    parser.add_argument("--config", default=None, help="config name (dev/test/prod); defaults to FLASK_CONFIG")
    args = parser.parse_args()

    app = create_app(args.config)
    with app.app_context():
        if args.reset:
            db.drop_all()
        db.create_all()
        counts = seed_hierarchy(app.config.get("SEED_DEPARTMENTS", []))
        log.info("%s complete: %s", "reset+seed" if args.reset else "soft seed", counts)

if __name__ == "__main__":
    main()
