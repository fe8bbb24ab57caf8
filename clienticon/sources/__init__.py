# sources package
