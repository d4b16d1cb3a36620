"""Product catalogue: the product document, its repository and the listing query builder."""
