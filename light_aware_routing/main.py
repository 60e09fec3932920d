#!/usr/bin/env python3
"""
Light-Aware Routing - Command Line Interface

Scores candidate walking routes against a streetlight dataset and prints the
fastest, balanced and most-lit variants.
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .algorithms import RouteVariantSelector, create_scorer_from_config
from .config import LightScoringConfig
from .data import RouteCandidate, ScoredCandidate
from .mapping import StreetlightIndex
from .providers import DirectionsError, GoogleDirectionsClient
from .visualization import RouteVisualizer

logger = logging.getLogger(__name__)


def load_candidates(path: str) -> List[RouteCandidate]:
    """
    Load route candidates from a JSON file holding a list of objects.

    Raises:
        ValueError: If the file is not a JSON list or a candidate is invalid
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError("Candidate file must contain a JSON list")

    candidates = []
    for i, item in enumerate(data):
        try:
            candidate = RouteCandidate.from_dict(item)
            candidate.validate()
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid candidate #{i}: {e}")
        candidates.append(candidate)
    return candidates


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score walking routes by streetlight coverage")
    parser.add_argument("--streetlights", required=True, help="Streetlight GeoJSON file")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--candidates", help="JSON file with route candidates")
    source.add_argument("--start", help="Origin for Google Directions (requires --end)")
    parser.add_argument("--end", help="Destination for Google Directions")
    parser.add_argument("--method", default="advanced", choices=["advanced", "density"],
                        help="Light scoring method")
    parser.add_argument("--map", dest="map_path", help="Write an HTML map of the variants")
    parser.add_argument("--json", action="store_true", help="Print variants as JSON")
    parser.add_argument("--log-level", default="warning",
                        choices=["debug", "info", "warning", "error"], help="Log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the scoring pipeline from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.start and not args.end:
        parser.error("--start requires --end")

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = LightScoringConfig(scoring_method=args.method)
    index = StreetlightIndex.from_geojson(args.streetlights)
    if index.is_empty:
        print("⚠ No streetlights loaded - every route will get the neutral score")

    try:
        if args.candidates:
            candidates = load_candidates(args.candidates)
        else:
            client = GoogleDirectionsClient(api_key=os.getenv("GOOGLE_MAPS_API_KEY"))
            candidates = client.fetch_candidates(args.start, args.end)
    except (OSError, ValueError, DirectionsError) as e:
        print(f"❌ Could not load route candidates: {e}")
        return 1

    if not candidates:
        print("❌ No route candidates found")
        return 1

    scorer = create_scorer_from_config(config)
    scored = [ScoredCandidate.from_candidate(c, scorer.score(c, index)) for c in candidates]
    variants = RouteVariantSelector().select(scored)

    if args.json:
        print(json.dumps([v.to_dict() for v in variants], indent=2))
    else:
        print(f"💡 {len(index)} streetlights, {len(candidates)} candidates, method: {scorer.name}")
        for variant in variants:
            distance = variant.distance_text or f"{variant.distance_km or 0:.2f} km"
            duration = variant.duration_text or f"{variant.duration_minutes:.0f} min"
            print(f"   {variant.label:<22} light {variant.light_score:4.1f}/10  {distance:>10}  {duration:>8}")

    if args.map_path:
        visualizer = RouteVisualizer(config)
        try:
            visualizer.save_map(visualizer.create_variant_map(variants, index), args.map_path)
        except OSError as e:
            print(f"❌ Could not write map: {e}")
            return 1
        print(f"🗺️ Map written to {args.map_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
