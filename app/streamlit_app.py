"""Streamlit storefront for Gamelle, the home-cooked dish marketplace.

Features:
- Dish catalogue grid with cook attribution, price and rating
- Natural-language search powered by Google Gemini with Google Search grounding
- Source citations for grounded search answers
- "Sell a dish" form with AI-generated name and description ideas
"""

from __future__ import annotations

import logging
import sys
from functools import partial
from html import escape
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.catalog import (
    add_dish,
    begin_idea_request,
    filter_dishes,
    load_dishes,
    run_idea_request,
    run_search,
    validate_listing,
)
from core.config import GamelleConfig
from core.dish_search import search_dishes
from core.errors import ConfigurationError
from core.idea_generator import generate_ideas
from core.models import GeneratedIdea

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ============================================================================
# Page config and custom CSS
# ============================================================================

st.set_page_config(
    page_title="Gamelle - Plats faits maison",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
    .gamelle-brand { font-size: 2.2rem; font-weight: 800; color: #1e293b; letter-spacing: -0.04em; }
    .gamelle-brand span { color: #f97316; }
    .gamelle-price { color: #f97316; font-weight: 700; font-size: 1.2rem; }
    .gamelle-sources { background: #f5f5f4; border-radius: 8px; padding: 8px 14px; font-size: 0.9rem; }
    div[data-testid="stVerticalBlockBorderWrapper"] { border-radius: 14px; }
</style>
""", unsafe_allow_html=True)

# ============================================================================
# Session state initialization
# ============================================================================


def init_session_state():
    try:
        config = GamelleConfig.from_env()
    except ConfigurationError as e:
        logger.error("Invalid configuration, using defaults: %s", e)
        config = GamelleConfig()

    defaults = {
        "config": config,
        "dishes": None,
        "matched_ids": None,
        "citations": [],
        "search_error": "",
        "show_sell_form": False,
        "ideas": [],
        "ideas_error": "",
        "generating": False,
        "sell_error": "",
        "dish_name": "",
        "dish_description": "",
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val

    if st.session_state["dishes"] is None:
        try:
            st.session_state["dishes"] = load_dishes(config.dishes_path)
        except (OSError, ValueError, KeyError) as e:
            logger.error("Could not load dishes from %s: %s", config.dishes_path, e)
            st.session_state["dishes"] = []


init_session_state()

# ============================================================================
# Callbacks
# ============================================================================


def toggle_sell_form():
    st.session_state["show_sell_form"] = not st.session_state["show_sell_form"]
    if not st.session_state["show_sell_form"]:
        st.session_state["ideas"] = []
        st.session_state["ideas_error"] = ""
        st.session_state["sell_error"] = ""
        st.session_state["generating"] = False


def select_idea(idea: GeneratedIdea):
    st.session_state["dish_name"] = idea.nom_plat
    st.session_state["dish_description"] = idea.description_plat


def publish_dish():
    name = st.session_state["dish_name"]
    description = st.session_state["dish_description"]
    price = st.session_state["dish_price"]
    cook_name = st.session_state["cook_name"]

    error = validate_listing(name, description, price, cook_name)
    if error:
        st.session_state["sell_error"] = error
        return

    st.session_state["dishes"] = add_dish(
        st.session_state["dishes"],
        name=name.strip(),
        description=description.strip(),
        price=float(str(price).replace(",", ".")),
        cuisine=st.session_state.get("cuisine_type", "").strip(),
        cook_name=cook_name.strip(),
    )
    for key in ("dish_name", "dish_description", "dish_price", "cook_name"):
        st.session_state[key] = ""
    st.session_state["ideas"] = []
    st.session_state["sell_error"] = ""
    st.session_state["show_sell_form"] = False
    st.toast("Votre plat est en ligne !")


# ============================================================================
# Header
# ============================================================================

head_col1, head_col2 = st.columns([4, 1])
with head_col1:
    st.markdown('<div class="gamelle-brand">🍲 Gam<span>elle</span></div>', unsafe_allow_html=True)
    st.caption("Découvrir · Comment ça marche ? · Blog")
with head_col2:
    st.button(
        "Fermer" if st.session_state["show_sell_form"] else "Vendre un plat",
        type="primary",
        on_click=toggle_sell_form,
        use_container_width=True,
    )

# ============================================================================
# Sell a dish
# ============================================================================

if st.session_state["show_sell_form"]:
    with st.container(border=True):
        st.subheader("Vendez votre création")
        st.write("Remplissez ce formulaire et laissez notre IA vous aider à trouver le nom parfait !")

        idea_col, form_col = st.columns(2)

        with idea_col:
            ingredients = st.text_input(
                "Ingrédients principaux", key="ingredients",
                placeholder="Ex: poulet, crème, champignons",
            )
            cuisine_type = st.text_input(
                "Type de cuisine", key="cuisine_type",
                placeholder="Ex: Française, Italienne",
            )

            st.button(
                "✨ Générer des idées",
                use_container_width=True,
                disabled=st.session_state["generating"],
                on_click=begin_idea_request,
                args=(st.session_state,),
            )
            if st.session_state["generating"]:
                with st.spinner("Génération en cours..."):
                    run_idea_request(
                        st.session_state,
                        ingredients,
                        cuisine_type,
                        generate=partial(generate_ideas, config=st.session_state["config"]),
                    )
                st.rerun()

            if st.session_state["ideas_error"]:
                st.error(st.session_state["ideas_error"])

            for i, idea in enumerate(st.session_state["ideas"]):
                with st.container(border=True):
                    st.markdown(f"**{idea.nom_plat}**")
                    st.caption(idea.description_plat)
                    st.button("Choisir", key=f"pick_idea_{i}", on_click=select_idea, args=(idea,))

        with form_col:
            st.markdown("##### Détails de votre plat")
            st.text_input("Nom du plat", key="dish_name")
            st.text_area("Description", key="dish_description", height=120)
            price_col, cook_col = st.columns(2)
            with price_col:
                st.text_input("Prix (€)", key="dish_price", placeholder="15.00")
            with cook_col:
                st.text_input("Votre nom de Chef", key="cook_name", placeholder="Chef Antoine")

            if st.session_state["sell_error"]:
                st.error(st.session_state["sell_error"])

            st.button("🚀 Publier mon plat", type="primary", on_click=publish_dish, use_container_width=True)

# ============================================================================
# Hero search
# ============================================================================

st.markdown("## Des plats faits maison, près de chez vous")

with st.form("search_form", clear_on_submit=False):
    search_col, submit_col = st.columns([5, 1])
    with search_col:
        query = st.text_input(
            "Recherche",
            placeholder="Ex: quelque chose de fromager et italien",
            label_visibility="collapsed",
        )
    with submit_col:
        submitted = st.form_submit_button("Rechercher", use_container_width=True)

if submitted:
    with st.spinner("Recherche en cours..."):
        matched_ids, citations, search_error = run_search(
            query,
            st.session_state["dishes"],
            search=partial(search_dishes, config=st.session_state["config"]),
        )
    st.session_state["matched_ids"] = matched_ids
    st.session_state["citations"] = citations
    st.session_state["search_error"] = search_error

# ============================================================================
# Grounding sources
# ============================================================================

citations = st.session_state["citations"]
if citations:
    links = " ".join(
        f'<a href="{escape(c.uri)}" target="_blank" title="{escape(c.title)}">[{i}]</a>'
        for i, c in enumerate(citations, start=1)
    )
    st.markdown(
        f'<div class="gamelle-sources"><b>Informations de recherche fournies par Google.</b> '
        f"Sources: {links}</div>",
        unsafe_allow_html=True,
    )

if st.session_state["search_error"]:
    st.error(st.session_state["search_error"])

# ============================================================================
# Dish grid
# ============================================================================

displayed = filter_dishes(st.session_state["dishes"], st.session_state["matched_ids"])

if st.session_state["matched_ids"] is not None:
    st.caption(f"{len(displayed)} plat(s) correspondant à votre recherche")

if not displayed:
    st.info("Aucun plat ne correspond à votre recherche.")
else:
    grid_cols = 3
    cols = st.columns(grid_cols)
    for idx, dish in enumerate(displayed):
        with cols[idx % grid_cols]:
            with st.container(border=True):
                if dish.image_url:
                    st.image(dish.image_url, use_container_width=True)
                st.markdown(f"**{dish.name}**")
                st.caption(f"{dish.cuisine} · par {dish.cook.name}")
                st.write(dish.description)
                price_col, rating_col = st.columns(2)
                with price_col:
                    st.markdown(
                        f'<span class="gamelle-price">{dish.price:.2f} €</span>',
                        unsafe_allow_html=True,
                    )
                with rating_col:
                    st.markdown(f"⭐ {dish.rating} ({dish.reviews} avis)")

# ============================================================================
# How it works
# ============================================================================

st.divider()
st.markdown("### Comment ça marche ?")
step1, step2, step3 = st.columns(3)
with step1:
    st.markdown("**1. Découvrez**")
    st.write("Parcourez les plats cuisinés par les chefs amateurs de votre quartier.")
with step2:
    st.markdown("**2. Commandez**")
    st.write("Choisissez votre plat et réservez votre portion en quelques clics.")
with step3:
    st.markdown("**3. Régalez-vous**")
    st.write("Récupérez votre gamelle encore chaude et savourez le fait maison.")

st.caption("© Gamelle - La cuisine de quartier")
