"""Scene data for the camera, textured-quad and PBR examples."""