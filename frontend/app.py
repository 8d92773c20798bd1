import os
from typing import Optional

import requests
import streamlit as st

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
PAGE_SIZE = 9
COLUMNS = 3


def get_hotels(
    page_number: int,
    filter_text: Optional[str],
    min_rating: float,
    sort_option: str,
) -> list:
    params = {
        "pageNumber": page_number,
        "pageSize": PAGE_SIZE,
        "minRating": min_rating,
        "sortOption": sort_option,
    }
    if filter_text:
        params["filterText"] = filter_text
    resp = requests.get(f"{BACKEND_URL}/api/hotel/getHotels", params=params, timeout=10)
    resp.raise_for_status()
    return resp.json()


def image_url(path: str) -> str:
    if path.startswith(("http://", "https://")):
        return path
    return f"{BACKEND_URL}/{path.lstrip('/')}"


st.set_page_config(page_title="Hotels", layout="wide")
st.title("Hotels")
st.caption("Backend: FastAPI | UI: Streamlit")

if "page_number" not in st.session_state:
    st.session_state.page_number = 1

with st.sidebar:
    st.subheader("Search")
    filter_text = st.text_input("Name or location", value="")
    min_rating = st.slider("Minimum rating", min_value=0.0, max_value=5.0, value=0.0, step=0.5)
    sort_label = st.radio("Sort by", options=["Name", "Rating"], index=0)
    if st.button("Reset to first page"):
        st.session_state.page_number = 1

try:
    hotels = get_hotels(
        page_number=st.session_state.page_number,
        filter_text=filter_text.strip() or None,
        min_rating=min_rating,
        sort_option=sort_label.lower(),
    )
except requests.RequestException as exc:
    st.error(f"Failed to load hotels: {exc}")
    hotels = []

if not hotels:
    st.info("No hotels match the current filters.")

for row_start in range(0, len(hotels), COLUMNS):
    cols = st.columns(COLUMNS)
    for col, hotel in zip(cols, hotels[row_start : row_start + COLUMNS]):
        with col:
            if hotel["images"]:
                st.image(image_url(hotel["images"][0]), width="stretch")
            st.markdown(f"**{hotel['name']}**  \n{hotel['location']} · ⭐ {hotel['rating']:.1f}")
            st.write(hotel["description"])

prev_col, page_col, next_col = st.columns([1, 2, 1])
with prev_col:
    if st.button("Previous", disabled=st.session_state.page_number <= 1):
        st.session_state.page_number -= 1
        st.rerun()
with page_col:
    st.write(f"Page {st.session_state.page_number}")
with next_col:
    if st.button("Next", disabled=len(hotels) < PAGE_SIZE):
        st.session_state.page_number += 1
        st.rerun()
