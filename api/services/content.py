"""
Static safety tips and method information served by the API.
"""

SAFETY_TIPS = [
    {
        "id": 1,
        "category": "Before you go",
        "text": "Share your route with a trusted contact and let them know your ETA.",
    },
    {
        "id": 2,
        "category": "On the way",
        "text": "Stay on main roads and walk on well-lit sidewalks whenever possible.",
    },
    {
        "id": 3,
        "category": "Awareness",
        "text": "Keep your headphones volume low so you remain aware of your surroundings.",
    },
    {
        "id": 4,
        "category": "Emergency",
        "text": "If you feel unsafe, move toward a busy area or an open business and call for help.",
    },
]

METHOD_INFO = {
    "title": "How we calculate lighting",
    "description": (
        "We estimate how well-lit a route is by combining map directions with public "
        "data about streetlights. For each point along the route we look at how many "
        "streetlights are nearby and how far the closest one is, then compute a light score."
    ),
    "steps": [
        "We retrieve candidate walking routes between the start and end points using Google Directions.",
        "For each route, we look up streetlight locations in public open data.",
        "We measure light density, distance to the nearest light, dark stretches, "
        "lit crossings and road speed along the route.",
        "We combine these values into a single light score out of 10 and compare routes by both time and lighting.",
    ],
    "limitations": [
        "We do not use crime data or personal information.",
        "Open data about infrastructure can be incomplete or outdated.",
        "Weather, temporary outages or construction are not reflected in real time.",
        "This tool is a decision-support tool and does not guarantee safety.",
    ],
}
