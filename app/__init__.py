"""
Streamlit exploration page for the Gaussian model.
"""
