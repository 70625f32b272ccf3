"""Application generation engine: options, manifest, contexts and plan."""
