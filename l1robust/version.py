version = '0.1.0'
full_version = version
