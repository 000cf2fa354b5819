"""Small vector, box and ray types used by the frustum geometry."""
