DEFAULTS = {
    # Default ownership strategy for GraphBuilder: "shared" or "arena"
    "OWNERSHIP_STRATEGY": "shared",
    # Track borrows on edge cells and fail loudly on reentrant mutation
    "BORROW_CHECKS": True,
    # Traversal form: "iterative" (explicit work stack) or "recursive"
    "TRAVERSAL_MODE": "iterative",
}
