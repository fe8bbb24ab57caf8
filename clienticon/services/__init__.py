# services package
