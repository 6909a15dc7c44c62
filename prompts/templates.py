"""Prompt templates and response schema for the Gemini calls."""

from __future__ import annotations

from string import Template

# --- Idea generation (French storefront copy) ---

IDEAS_PROMPT = Template(
    'Je suis un cuisinier amateur sur une plateforme nommée "Gamelle" qui permet '
    "de vendre des plats faits maison.\n"
    "Aide-moi à trouver des idées pour mon plat.\n"
    "\n"
    "Ingrédients principaux: $ingredients\n"
    "Type de cuisine: $cuisine\n"
    "\n"
    "Génère 3 suggestions créatives et vendeuses. Pour chaque suggestion, fournis "
    "un nom de plat et une courte description (2 phrases maximum).\n"
    "La réponse doit être exclusivement en français."
)

IDEAS_RESPONSE_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "suggestions": {
            "type": "ARRAY",
            "description": "Liste de 3 à 5 suggestions de noms et descriptions de plats.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "nom_plat": {
                        "type": "STRING",
                        "description": "Nom créatif et appétissant pour le plat.",
                    },
                    "description_plat": {
                        "type": "STRING",
                        "description": "Description courte et alléchante du plat (2-3 phrases max).",
                    },
                },
                "required": ["nom_plat", "description_plat"],
            },
        }
    },
    "required": ["suggestions"],
}

# --- Natural-language search ---

SEARCH_PROMPT = Template(
    'You are a smart search assistant for a homemade food platform called "Gamelle".\n'
    'A user is searching for: "$query".\n'
    "\n"
    "Here is the list of available dishes:\n"
    "$dish_list\n"
    "\n"
    "Analyze the user's query and the list of dishes.\n"
    "Your main goal is to identify which dishes from the list are the best match "
    "for the user's query.\n"
    "Consider dish names, descriptions, and cuisine types. The query can be "
    'conversational (e.g., "I want something cheesy and italian").\n'
    "\n"
    "You MUST return a list of matching dish IDs.\n"
    "Format your response as follows, AND NOTHING ELSE:\n"
    "MATCHING_IDS: [id1, id2, id3]\n"
    "\n"
    "If no dishes match, return an empty array:\n"
    "MATCHING_IDS: []\n"
    "\n"
    "Use the provided search tool if the user's query is about general food trends, "
    "popular dishes, or something that requires current information from the web. "
    "If you use the search tool, the information might help you decide which of "
    "the available dishes are relevant."
)

DISH_LINE = Template("- ID $id: $name ($cuisine) - $description")
