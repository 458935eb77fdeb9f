"""Example pipeline: load a radar configuration, lay it out and expand a description."""

from radar_layout import RadarEngine, load_config, print_legend, print_result

CONFIG = {
    "svg_id": "radar",
    "width": 1450,
    "height": 1000,
    "title": "Tech Radar 2026.10",
    "quadrants": [
        {"name": "Languages"},
        {"name": "Infrastructure"},
        {"name": "Datastores"},
        {"name": "Data Management"},
    ],
    "rings": [
        {"name": "ADOPT", "color": "#5ba300"},
        {"name": "TRIAL", "color": "#009eb0"},
        {"name": "ASSESS", "color": "#c7ba00"},
        {"name": "HOLD", "color": "#e09b96"},
    ],
    "colors": {"background": "#fff", "grid": "#bbb", "inactive": "#ddd"},
    "entries": [
        {"label": "Python", "quadrant": 0, "ring": 0, "moved": 0,
         "description": "Default choice for data tooling and automation"},
        {"label": "Kotlin", "quadrant": 0, "ring": 0, "moved": 1},
        {"label": "Scala", "quadrant": 0, "ring": 1, "moved": -1},
        {"label": "Kubernetes", "quadrant": 1, "ring": 0, "moved": 0},
        {"label": "Nomad", "quadrant": 1, "ring": 2, "moved": 0, "active": False},
        {"label": "PostgreSQL", "quadrant": 2, "ring": 0, "moved": 0,
         "link": "https://www.postgresql.org"},
        {"label": "Cassandra", "quadrant": 2, "ring": 3, "moved": -1},
        {"label": "Kafka", "quadrant": 3, "ring": 1, "moved": 0,
         "description": "Event streaming backbone"},
    ],
}


def main() -> None:
    config = load_config(CONFIG)
    engine = RadarEngine()
    result = engine.render(config)
    print(print_result(result))

    python = next(entry for entry in result.entries if entry.label == "Python")
    print(f"\nAfter selecting {python.id}:")
    print(print_legend(engine.select(python.id)))


if __name__ == "__main__":
    main()
