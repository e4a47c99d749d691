"""Character-grid drawing, the header and sidebar, and whole-screen layout."""