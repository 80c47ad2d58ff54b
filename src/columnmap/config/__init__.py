from columnmap.config.type_mapping import TypeMappingConfig
