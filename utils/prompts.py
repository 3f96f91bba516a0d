from typing import Any, Dict, List, Optional

from analysis.scoring import display_scores, planet_type, to_percent


def _f(val: Any) -> Optional[float]:
    try:
        if val is None or isinstance(val, bool):
            return None
        if isinstance(val, str):
            s = val.strip()
            if not s:
                return None
            return float(s)
        return float(val)
    except (TypeError, ValueError):
        return None


def _show(val: Any) -> str:
    if val is None or (isinstance(val, str) and not val.strip()):
        return "unknown"
    return str(val)


def _with_scores(planet: Dict[str, Any]) -> Dict[str, Any]:
    return display_scores(dict(planet))


_BODY_DESCRIPTIONS = {
    "Sub-Earth": "Sub-Earth rocky planet",
    "Earth-like": "Earth-like rocky planet",
    "Super-Earth": "Super-Earth rocky planet",
    "Neptune-like": "Neptune-like gas planet with a thick atmosphere",
    "Gas Giant": "Jupiter-like gas giant",
}


def describe_body(radius: Optional[float]) -> str:
    return _BODY_DESCRIPTIONS.get(planet_type(radius), "planet of undetermined composition")


def describe_climate(temp_k: Optional[float]) -> str:
    if temp_k is None:
        return "unknown"
    if temp_k < 200:
        return "frozen ice world"
    if temp_k < 270:
        return "cold"
    if temp_k < 320:
        return "temperate"
    if temp_k < 400:
        return "hot"
    return "extremely hot molten surface"


def describe_star_color(teff: Optional[float]) -> str:
    if teff is None:
        return "yellow"
    if teff > 30000:
        return "blue"
    if teff > 10000:
        return "blue-white"
    if teff > 7500:
        return "white"
    if teff > 6000:
        return "yellow-white"
    if teff > 5200:
        return "yellow"
    if teff > 3700:
        return "orange"
    return "red"


def summary_prompt(planet: Dict[str, Any]) -> str:
    p = _with_scores(planet)
    return f"""
Generate an engaging, easy-to-understand summary about the exoplanet {_show(p.get('pl_name'))} for non-scientists.

Here's the scientific data about the planet:
- Planet radius: {_show(p.get('pl_rade'))} Earth radii
- Planet mass: {_show(p.get('pl_bmasse'))} Earth masses
- Orbital period: {_show(p.get('pl_orbper'))} days
- Equilibrium temperature: {_show(p.get('pl_eqt'))} K
- Host star temperature: {_show(p.get('st_teff'))} K
- Host star mass: {_show(p.get('st_mass'))} Solar masses
- Host star radius: {_show(p.get('st_rad'))} Solar radii
- Distance from Earth: {_show(p.get('sy_dist'))} parsecs
- Discovery year: {_show(p.get('disc_year'))}
- Discovery facility: {_show(p.get('disc_facility'))}
- Habitability score: {to_percent(p['habitability_score'])}%
- Terraformability score: {to_percent(p['terraformability_score'])}%

Make the summary engaging and educational for the general public. Use analogies and comparisons to Earth when possible.
Explain what life might be like on this planet and whether humans could potentially visit or live there someday.
Keep the tone conversational and exciting, highlighting the most interesting aspects of this exoplanet.

Format the response in 3-4 short paragraphs with no headings or bullet points.
""".strip()


def image_description_prompt(planet: Dict[str, Any]) -> str:
    p = _with_scores(planet)
    radius = _f(p.get("pl_rade"))
    has_water = (
        "with possible oceans and water features"
        if p["habitability_score"] > 0.5
        else "likely without surface water"
    )
    return f"""
Create a detailed description for generating an image of exoplanet {_show(p.get('pl_name'))}.

This is a {describe_body(radius)} that is {_show(p.get('pl_rade'))} times Earth's radius and {_show(p.get('pl_bmasse'))} times Earth's mass.
It orbits a {describe_star_color(_f(p.get('st_teff')))} star every {_show(p.get('pl_orbper'))} days.
The planet has a {describe_climate(_f(p.get('pl_eqt')))} climate with a surface temperature of {_show(p.get('pl_eqt'))} K.
It is {has_water}.

Describe the visual appearance of this planet in detail, including:
- Colors and atmospheric appearance
- Surface features like continents, oceans, mountains, or clouds if applicable
- Any unique visual characteristics based on its properties
- Lighting conditions based on its star type

The description should be scientifically plausible but visually striking.
Keep the description to 3-4 sentences focused only on visual appearance.
""".strip()


def image_prompts(planet: Dict[str, Any], description: str) -> List[str]:
    name = _show(planet.get("pl_name"))
    description = description.strip()
    return [
        f"A photorealistic view of exoplanet {name} from space, {description}",
        f"The surface of exoplanet {name}, {description}",
        f"The star system containing exoplanet {name}, showing its orbit around its host star",
        f"A close-up view of interesting geological features on exoplanet {name}, {description}",
    ]
