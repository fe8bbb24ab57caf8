# routes package
