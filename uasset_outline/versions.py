"""
Unreal Engine package version tables.

Package files carry two independent, monotonically increasing object
version counters: the UE4 line (``FileVersionUE4``) and the UE5 line
(``FileVersionUE5``). Most optional fields in the package summary and in
the export/import maps appear once the relevant counter reaches a given
ordinal. Member order matters: every gate is a ``>=`` comparison.
"""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Dict, Union


class ObjectVersion(IntEnum):
    """UE4 object version line (EUnrealEngineObjectUE4Version)."""
    OLDEST_LOADABLE_PACKAGE = 214
    BLUEPRINT_VARS_NOT_READ_ONLY = 215
    STATIC_MESH_STORE_NAV_COLLISION = 216
    ATMOSPHERIC_FOG_DECAY_NAME_CHANGE = 217
    SCENECOMP_TRANSLATION_TO_LOCATION = 218
    MATERIAL_ATTRIBUTES_REORDERING = 219
    COLLISION_PROFILE_SETTING = 220
    BLUEPRINT_SKEL_TEMPORARY_TRANSIENT = 221
    BLUEPRINT_SKEL_SERIALIZED_AGAIN = 222
    BLUEPRINT_SETS_REPLICATION = 223
    WORLD_LEVEL_INFO = 224
    AFTER_CAPSULE_HALF_HEIGHT_CHANGE = 225
    ADDED_NAMESPACE_AND_KEY_DATA_TO_FTEXT = 226
    ATTENUATION_SHAPES = 227
    LIGHTCOMPONENT_USE_IES_TEXTURE_MULTIPLIER_ON_NON_IES_BRIGHTNESS = 228
    REMOVE_INPUT_COMPONENTS_FROM_BLUEPRINTS = 229
    VARK2NODE_USE_MEMBERREFSTRUCT = 230
    REFACTOR_MATERIAL_EXPRESSION_SCENECOLOR_AND_SCENEDEPTH_INPUTS = 231
    SPLINE_MESH_ORIENTATION = 232
    REVERB_EFFECT_ASSET_TYPE = 233
    MAX_TEXCOORD_INCREASED = 234
    SPEEDTREE_STATICMESH = 235
    LANDSCAPE_COMPONENT_LAZY_REFERENCES = 236
    SWITCH_CALL_NODE_TO_USE_MEMBER_REFERENCE = 237
    ADDED_SKELETON_ARCHIVER_REMOVAL = 238
    ADDED_SKELETON_ARCHIVER_REMOVAL_SECOND_TIME = 239
    BLUEPRINT_SKEL_CLASS_TRANSIENT_AGAIN = 240
    ADD_COOKED_TO_UCLASS = 241
    DEPRECATED_STATIC_MESH_THUMBNAIL_PROPERTIES_REMOVED = 242
    COLLECTIONS_IN_SHADERMAPID = 243
    REFACTOR_MOVEMENT_COMPONENT_HIERARCHY = 244
    FIX_TERRAIN_LAYER_SWITCH_ORDER = 245
    ALL_PROPS_TO_CONSTRAINTINSTANCE = 246
    LOW_QUALITY_DIRECTIONAL_LIGHTMAPS = 247
    ADDED_NOISE_EMITTER_COMPONENT = 248
    ADD_TEXT_COMPONENT_VERTICAL_ALIGNMENT = 249
    ADDED_FBX_ASSET_IMPORT_DATA = 250
    REMOVE_LEVELBODYSETUP = 251
    REFACTOR_CHARACTER_CROUCH = 252
    SMALLER_DEBUG_MATERIALSHADER_UNIFORM_EXPRESSIONS = 253
    APEX_CLOTH = 254
    SAVE_COLLISIONRESPONSE_PER_CHANNEL = 255
    ADDED_LANDSCAPE_SPLINE_EDITOR_MESH = 256
    CHANGED_MATERIAL_REFACTION_TYPE = 257
    REFACTOR_PROJECTILE_MOVEMENT = 258
    REMOVE_PHYSICALMATERIALPROPERTY = 259
    PURGED_FMATERIAL_COMPILE_OUTPUTS = 260
    ADD_COOKED_TO_LANDSCAPE = 261
    CONSUME_INPUT_PER_BIND = 262
    SOUND_CLASS_GRAPH_EDITOR = 263
    FIXUP_TERRAIN_LAYER_NODES = 264
    RETROFIT_CLAMP_EXPRESSIONS_SWAP = 265
    REMOVE_LIGHT_MOBILITY_CLASSES = 266
    REFACTOR_PHYSICS_BLENDING = 267
    WORLD_LEVEL_INFO_UPDATED = 268
    STATIC_SKELETAL_MESH_SERIALIZATION_FIX = 269
    REMOVE_STATICMESH_MOBILITY_CLASSES = 270
    REFACTOR_PHYSICS_TRANSFORMS = 271
    REMOVE_ZERO_TRIANGLE_SECTIONS = 272
    CHARACTER_MOVEMENT_DECELERATION = 273
    CAMERA_ACTOR_USING_CAMERA_COMPONENT = 274
    CHARACTER_MOVEMENT_DEPRECATE_PITCH_ROLL = 275
    REBUILD_TEXTURE_STREAMING_DATA_ON_LOAD = 276
    SUPPORT_32_BIT_STATIC_MESH_INDICES = 277
    ADDED_CHUNKID_TO_ASSETDATA_AND_UPACKAGE = 278
    CHARACTER_DEFAULT_MOVEMENT_BINDINGS = 279
    APEX_CLOTH_LOD = 280
    ATMOSPHERIC_FOG_CACHE_DATA = 281
    ARRAY_PROPERTY_INNER_TAGS = 282
    KEEP_SKEL_MESH_INDEX_DATA = 283
    BODYSETUP_COLLISION_CONVERSION = 284
    REFLECTION_CAPTURE_COOKING = 285
    REMOVE_DYNAMIC_VOLUME_CLASSES = 286
    STORE_HASCOOKEDDATA_FOR_BODYSETUP = 287
    REFRACTION_BIAS_TO_REFRACTION_DEPTH_BIAS = 288
    REMOVE_SKELETALPHYSICSACTOR = 289
    PC_ROTATION_INPUT_REFACTOR = 290
    LANDSCAPE_PLATFORMDATA_COOKING = 291
    CREATEEXPORTS_CLASS_LINKING_FOR_BLUEPRINTS = 292
    REMOVE_NATIVE_COMPONENTS_FROM_BLUEPRINT_SCS = 293
    REMOVE_SINGLENODEINSTANCE = 294
    CHARACTER_BRAKING_REFACTOR = 295
    VOLUME_SAMPLE_LOW_QUALITY_SUPPORT = 296
    SPLIT_TOUCH_AND_CLICK_ENABLES = 297
    HEALTH_DEATH_REFACTOR = 298
    SOUND_NODE_ENVELOPER_CURVE_CHANGE = 299
    POINT_LIGHT_SOURCE_RADIUS = 300
    SCENE_CAPTURE_CAMERA_CHANGE = 301
    MOVE_SKELETALMESH_SHADOWCASTING = 302
    CHANGE_SETARRAY_BYTECODE = 303
    MATERIAL_INSTANCE_BASE_PROPERTY_OVERRIDES = 304
    COMBINED_LIGHTMAP_TEXTURES = 305
    BUMPED_MATERIAL_EXPORT_GUIDS = 306
    BLUEPRINT_INPUT_BINDING_OVERRIDES = 307
    FIXUP_BODYSETUP_INVALID_CONVEX_TRANSFORM = 308
    FIXUP_STIFFNESS_AND_DAMPING_SCALE = 309
    REFERENCE_SKELETON_REFACTOR = 310
    K2NODE_REFERENCEGUIDS = 311
    FIXUP_ROOTBONE_PARENT = 312
    TEXT_RENDER_COMPONENTS_WORLD_SPACE_SIZING = 313
    MATERIAL_INSTANCE_BASE_PROPERTY_OVERRIDES_PHASE_2 = 314
    CLASS_NOTPLACEABLE_ADDED = 315
    WORLD_LEVEL_INFO_LOD_LIST = 316
    CHARACTER_MOVEMENT_VARIABLE_RENAMING_1 = 317
    FSLATESOUND_CONVERSION = 318
    WORLD_LEVEL_INFO_ZORDER = 319
    PACKAGE_REQUIRES_LOCALIZATION_GATHER_FLAGGING = 320
    BP_ACTOR_VARIABLE_DEFAULT_PREVENTING = 321
    TEST_ANIMCOMP_CHANGE = 322
    EDITORONLY_BLUEPRINTS = 323
    EDGRAPHPINTYPE_SERIALIZATION = 324
    NO_MIRROR_BRUSH_MODEL_COLLISION = 325
    CHANGED_CHUNKID_TO_BE_AN_ARRAY_OF_CHUNKIDS = 326
    WORLD_NAMED_AFTER_PACKAGE = 327
    SKY_LIGHT_COMPONENT = 328
    WORLD_LAYER_ENABLE_DISTANCE_STREAMING = 329
    REMOVE_ZONES_FROM_MODEL = 330
    FIX_ANIMATIONBASEPOSE_SERIALIZATION = 331
    SUPPORT_8_BONE_INFLUENCES_SKELETAL_MESHES = 332
    ADD_OVERRIDE_GRAVITY_FLAG = 333
    SUPPORT_GPUSKINNING_8_BONE_INFLUENCES = 334
    ANIM_SUPPORT_NONUNIFORM_SCALE_ANIMATION = 335
    ENGINE_VERSION_OBJECT = 336
    PUBLIC_WORLDS = 337
    SKELETON_GUID_SERIALIZATION = 338
    CHARACTER_MOVEMENT_WALKABLE_FLOOR_REFACTOR = 339
    INVERSE_SQUARED_LIGHTS_DEFAULT = 340
    DISABLED_SCRIPT_LIMIT_BYTECODE = 341
    PRIVATE_REMOTE_ROLE = 342
    FOLIAGE_STATIC_MOBILITY = 343
    BUILD_SCALE_VECTOR = 344
    FOLIAGE_COLLISION = 345
    SKY_BENT_NORMAL = 346
    LANDSCAPE_COLLISION_DATA_COOKING = 347
    MORPHTARGET_CPU_TANGENTZDELTA_FORMATCHANGE = 348
    SOFT_CONSTRAINTS_USE_MASS = 349
    REFLECTION_DATA_IN_PACKAGES = 350
    FOLIAGE_MOVABLE_MOBILITY = 351
    UNDO_BREAK_MATERIALATTRIBUTES_CHANGE = 352
    ADD_CUSTOMPROFILENAME_CHANGE = 353
    FLIP_MATERIAL_COORDS = 354
    MEMBERREFERENCE_IN_PINTYPE = 355
    VEHICLES_UNIT_CHANGE = 356
    ANIMATION_REMOVE_NANS = 357
    SKELETON_ASSET_PROPERTY_TYPE_CHANGE = 358
    FIX_BLUEPRINT_VARIABLE_FLAGS = 359
    VEHICLES_UNIT_CHANGE2 = 360
    UCLASS_SERIALIZE_INTERFACES_AFTER_LINKING = 361
    STATIC_MESH_SCREEN_SIZE_LODS = 362
    FIX_MATERIAL_COORDS = 363
    SPEEDTREE_WIND_V7 = 364
    LOAD_FOR_EDITOR_GAME = 365
    SERIALIZE_RICH_CURVE_KEY = 366
    MOVE_LANDSCAPE_MICS_AND_TEXTURES_WITHIN_LEVEL = 367
    FTEXT_HISTORY = 368
    FIX_MATERIAL_COMMENTS = 369
    STORE_BONE_EXPORT_NAMES = 370
    MESH_EMITTER_INITIAL_ORIENTATION_DISTRIBUTION = 371
    DISALLOW_FOLIAGE_ON_BLUEPRINTS = 372
    FIXUP_MOTOR_UNITS = 373
    DEPRECATED_MOVEMENTCOMPONENT_MODIFIED_SPEEDS = 374
    RENAME_CANBECHARACTERBASE = 375
    GAMEPLAY_TAG_CONTAINER_TAG_TYPE_CHANGE = 376
    FOLIAGE_SETTINGS_TYPE = 377
    STATIC_SHADOW_DEPTH_MAPS = 378
    ADD_TRANSACTIONAL_TO_DATA_ASSETS = 379
    ADD_LB_WEIGHTBLEND = 380
    ADD_ROOTCOMPONENT_TO_FOLIAGEACTOR = 381
    FIX_MATERIAL_PROPERTY_OVERRIDE_SERIALIZE = 382
    ADD_LINEAR_COLOR_SAMPLER = 383
    ADD_STRING_ASSET_REFERENCES_MAP = 384
    BLUEPRINT_USE_SCS_ROOTCOMPONENT_SCALE = 385
    LEVEL_STREAMING_DRAW_COLOR_TYPE_CHANGE = 386
    CLEAR_NOTIFY_TRIGGERS = 387
    SKELETON_ADD_SMARTNAMES = 388
    ADDED_CURRENCY_CODE_TO_FTEXT = 389
    ENUM_CLASS_SUPPORT = 390
    FIXUP_WIDGET_ANIMATION_CLASS = 391
    SOUND_COMPRESSION_TYPE_ADDED = 392
    AUTO_WELDING = 393
    RENAME_CROUCHMOVESCHARACTERDOWN = 394
    LIGHTMAP_MESH_BUILD_SETTINGS = 395
    RENAME_SM3_TO_ES3_1 = 396
    DEPRECATE_UMG_STYLE_ASSETS = 397
    POST_DUPLICATE_NODE_GUID = 398
    RENAME_CAMERA_COMPONENT_VIEW_ROTATION = 399
    CASE_PRESERVING_FNAME = 400
    RENAME_CAMERA_COMPONENT_CONTROL_ROTATION = 401
    FIX_REFRACTION_INPUT_MASKING = 402
    GLOBAL_EMITTER_SPAWN_RATE_SCALE = 403
    CLEAN_DESTRUCTIBLE_SETTINGS = 404
    CHARACTER_MOVEMENT_UPPER_IMPACT_BEHAVIOR = 405
    BP_MATH_VECTOR_EQUALITY_USES_EPSILON = 406
    FOLIAGE_STATIC_LIGHTING_SUPPORT = 407
    SLATE_COMPOSITE_FONTS = 408
    REMOVE_SAVEGAMESUMMARY = 409
    REMOVE_SKELETALMESH_COMPONENT_BODYSETUP_SERIALIZATION = 410
    SLATE_BULK_FONT_DATA = 411
    ADD_PROJECTILE_FRICTION_BEHAVIOR = 412
    MOVEMENTCOMPONENT_AXIS_SETTINGS = 413
    GRAPH_INTERACTIVE_COMMENTBUBBLES = 414
    LANDSCAPE_SERIALIZE_PHYSICS_MATERIALS = 415
    RENAME_WIDGET_VISIBILITY = 416
    ANIMATION_ADD_TRACKCURVES = 417
    MONTAGE_BRANCHING_POINT_REMOVAL = 418
    BLUEPRINT_ENFORCE_CONST_IN_FUNCTION_OVERRIDES = 419
    ADD_PIVOT_TO_WIDGET_COMPONENT = 420
    PAWN_AUTO_POSSESS_AI = 421
    FTEXT_HISTORY_DATE_TIMEZONE = 422
    SORT_ACTIVE_BONE_INDICES = 423
    PERFRAME_MATERIAL_UNIFORM_EXPRESSIONS = 424
    MIKKTSPACE_IS_DEFAULT = 425
    LANDSCAPE_GRASS_COOKING = 426
    FIX_SKEL_VERT_ORIENT_MESH_PARTICLES = 427
    LANDSCAPE_STATIC_SECTION_OFFSET = 428
    ADD_MODIFIERS_RUNTIME_GENERATION = 429
    MATERIAL_MASKED_BLENDMODE_TIDY = 430
    MERGED_ADD_MODIFIERS_RUNTIME_GENERATION_TO_4_7_DEPRECATED = 431
    AFTER_MERGED_ADD_MODIFIERS_RUNTIME_GENERATION_TO_4_7_DEPRECATED = 432
    MERGED_ADD_MODIFIERS_RUNTIME_GENERATION_TO_4_7 = 433
    AFTER_MERGING_ADD_MODIFIERS_RUNTIME_GENERATION_TO_4_7 = 434
    SERIALIZE_LANDSCAPE_GRASS_DATA = 435
    OPTIONALLY_CLEAR_GPU_EMITTERS_ON_INIT = 436
    SERIALIZE_LANDSCAPE_GRASS_DATA_MATERIAL_GUID = 437
    BLUEPRINT_GENERATED_CLASS_COMPONENT_TEMPLATES_PUBLIC = 438
    ACTOR_COMPONENT_CREATION_METHOD = 439
    K2NODE_EVENT_MEMBER_REFERENCE = 440
    STRUCT_GUID_IN_PROPERTY_TAG = 441
    REMOVE_UNUSED_UPOLYS_FROM_UMODEL = 442
    REBUILD_HIERARCHICAL_INSTANCE_TREES = 443
    PACKAGE_SUMMARY_HAS_COMPATIBLE_ENGINE_VERSION = 444
    TRACK_UCS_MODIFIED_PROPERTIES = 445
    LANDSCAPE_SPLINE_CROSS_LEVEL_MESHES = 446
    DEPRECATE_USER_WIDGET_DESIGN_SIZE = 447
    ADD_EDITOR_VIEWS = 448
    FOLIAGE_WITH_ASSET_OR_CLASS = 449
    BODYINSTANCE_BINARY_SERIALIZATION = 450
    SERIALIZE_BLUEPRINT_EVENTGRAPH_FASTCALLS_IN_UFUNCTION = 451
    INTERPCURVE_SUPPORTS_LOOPING = 452
    MATERIAL_INSTANCE_BASE_PROPERTY_OVERRIDES_DITHERED_LOD_TRANSITION = 453
    SERIALIZE_LANDSCAPE_ES2_TEXTURES = 454
    CONSTRAINT_INSTANCE_MOTOR_FLAGS = 455
    SERIALIZE_PINTYPE_CONST = 456
    LIBRARY_CATEGORIES_AS_FTEXT = 457
    SKIP_DUPLICATE_EXPORTS_ON_SAVE_PACKAGE = 458
    SERIALIZE_TEXT_IN_PACKAGES = 459
    ADD_BLEND_MODE_TO_WIDGET_COMPONENT = 460
    NEW_LIGHTMASS_PRIMITIVE_SETTING = 461
    REPLACE_SPRING_NOZ_PROPERTY = 462
    TIGHTLY_PACKED_ENUMS = 463
    ASSET_IMPORT_DATA_AS_JSON = 464
    TEXTURE_LEGACY_GAMMA = 465
    ADDED_NATIVE_SERIALIZATION_FOR_IMMUTABLE_STRUCTURES = 466
    DEPRECATE_UMG_STYLE_OVERRIDES = 467
    STATIC_SHADOWMAP_PENUMBRA_SIZE = 468
    NIAGARA_DATA_OBJECT_DEV_UI_FIX = 469
    FIXED_DEFAULT_ORIENTATION_OF_WIDGET_COMPONENT = 470
    REMOVED_MATERIAL_USED_WITH_UI_FLAG = 471
    CHARACTER_MOVEMENT_ADD_BRAKING_FRICTION = 472
    BSP_UNDO_FIX = 473
    DYNAMIC_PARAMETER_DEFAULT_VALUE = 474
    STATIC_MESH_EXTENDED_BOUNDS = 475
    ADDED_NON_LINEAR_TRANSITION_BLENDS = 476
    AO_MATERIAL_MASK = 477
    NAVIGATION_AGENT_SELECTOR = 478
    MESH_PARTICLE_COLLISIONS_CONSIDER_PARTICLE_SIZE = 479
    BUILD_MESH_ADJ_BUFFER_FLAG_EXPOSED = 480
    MAX_ANGULAR_VELOCITY_DEFAULT = 481
    APEX_CLOTH_TESSELLATION = 482
    DECAL_SIZE = 483
    KEEP_ONLY_PACKAGE_NAMES_IN_STRING_ASSET_REFERENCES_MAP = 484
    COOKED_ASSETS_IN_EDITOR_SUPPORT = 485
    DIALOGUE_WAVE_NAMESPACE_AND_CONTEXT_CHANGES = 486
    MAKE_ROT_RENAME_AND_REORDER = 487
    K2NODE_VAR_REFERENCEGUIDS = 488
    SOUND_CONCURRENCY_PACKAGE = 489
    USERWIDGET_DEFAULT_FOCUSABLE_FALSE = 490
    BLUEPRINT_CUSTOM_EVENT_CONST_INPUT = 491
    USE_LOW_PASS_FILTER_FREQ = 492
    NO_ANIM_BP_CLASS_IN_GAMEPLAY_CODE = 493
    SCS_STORES_ALLNODES_ARRAY = 494
    FBX_IMPORT_DATA_RANGE_ENCAPSULATION = 495
    CAMERA_COMPONENT_ATTACH_TO_ROOT = 496
    INSTANCED_STEREO_UNIFORM_UPDATE = 497
    STREAMABLE_TEXTURE_MIN_MAX_DISTANCE = 498
    INJECT_BLUEPRINT_STRUCT_PIN_CONVERSION_NODES = 499
    INNER_ARRAY_TAG_INFO = 500
    FIX_SLOT_NAME_DUPLICATION = 501
    STREAMABLE_TEXTURE_AABB = 502
    PROPERTY_GUID_IN_PROPERTY_TAG = 503
    NAME_HASHES_SERIALIZED = 504
    INSTANCED_STEREO_UNIFORM_REFACTOR = 505
    COMPRESSED_SHADER_RESOURCES = 506
    PRELOAD_DEPENDENCIES_IN_COOKED_EXPORTS = 507
    TEMPLATEINDEX_IN_COOKED_EXPORTS = 508
    PROPERTY_TAG_SET_MAP_SUPPORT = 509
    ADDED_SEARCHABLE_NAMES = 510
    SIXTY_FOUR_BIT_EXPORTMAP_SERIALSIZES = 511
    SKYLIGHT_MOBILE_IRRADIANCE_MAP = 512
    ADDED_SWEEP_WHILE_WALKING_FLAG = 513
    ADDED_SOFT_OBJECT_PATH = 514
    POINTLIGHT_SOURCE_ORIENTATION = 515
    ADDED_PACKAGE_SUMMARY_LOCALIZATION_ID = 516
    FIX_WIDE_STRING_CRC = 517
    ADDED_PACKAGE_OWNER = 518
    SKINWEIGHT_PROFILE_DATA_LAYOUT_CHANGES = 519
    NON_OUTER_PACKAGE_IMPORT = 520
    ASSETREGISTRY_DEPENDENCYFLAGS = 521
    CORRECT_LICENSEE_FLAG = 522


class ObjectVersionUE5(IntEnum):
    """UE5 object version line (EUnrealEngineObjectUE5Version)."""
    INITIAL_VERSION = 1000
    NAMES_REFERENCED_FROM_EXPORT_DATA = 1001
    PAYLOAD_TOC = 1002
    OPTIONAL_RESOURCES = 1003
    LARGE_WORLD_COORDINATES = 1004
    REMOVE_OBJECT_EXPORT_PACKAGE_GUID = 1005
    TRACK_OBJECT_EXPORT_IS_INHERITED = 1006
    FSOFTOBJECTPATH_REMOVE_ASSET_PATH_FNAMES = 1007
    ADD_SOFTOBJECTPATH_LIST = 1008
    DATA_RESOURCES = 1009


class PackageFlags(IntFlag):
    """Package flags stored in the summary (EPackageFlags)."""
    NONE = 0x00000000
    NEWLY_CREATED = 0x00000001
    CLIENT_OPTIONAL = 0x00000002
    SERVER_SIDE_ONLY = 0x00000004
    COMPILED_IN = 0x00000010
    FOR_DIFFING = 0x00000020
    EDITOR_ONLY = 0x00000040
    DEVELOPER = 0x00000080
    UNCOOKED_ONLY = 0x00000100
    COOKED = 0x00000200
    CONTAINS_NO_ASSET = 0x00000400
    UNVERSIONED_PROPERTIES = 0x00002000
    CONTAINS_MAP_DATA = 0x00004000
    COMPILING = 0x00010000
    CONTAINS_MAP = 0x00020000
    REQUIRES_LOCALIZATION_GATHER = 0x00040000
    PLAY_IN_EDITOR = 0x00100000
    CONTAINS_SCRIPT = 0x00200000
    DISALLOW_EXPORT = 0x00400000
    DYNAMIC_IMPORTS = 0x10000000
    RUNTIME_GENERATED = 0x20000000
    RELOADING_FOR_COOKER = 0x40000000
    FILTER_EDITOR_ONLY = 0x80000000


# Oldest legacy (pre-UE4 tag) version understood and the newest one.
# -5: custom versions stored with GUID + friendly name
# -6: optimized custom version serialization
# -7: texture allocation info removed from the summary
# -8: FileVersionUE5 added
LEGACY_VERSION_NEWEST = -8
LEGACY_VERSION_OLDEST = -5

Threshold = Union[ObjectVersion, ObjectVersionUE5]


@dataclass(frozen=True)
class VersionGate:
    """A field that is only serialized from ``threshold`` onwards."""
    field: str
    threshold: Threshold

    @property
    def is_ue5(self) -> bool:
        return isinstance(self.threshold, ObjectVersionUE5)


def _gates(*entries) -> Dict[str, VersionGate]:
    return {name: VersionGate(name, threshold) for name, threshold in entries}


# Every version-conditioned field of the summary, export/import maps and
# property tags, keyed by the field it governs.
VERSION_GATES: Dict[str, VersionGate] = _gates(
    # package summary
    ('name_hashes', ObjectVersion.NAME_HASHES_SERIALIZED),
    ('localization_id', ObjectVersion.ADDED_PACKAGE_SUMMARY_LOCALIZATION_ID),
    ('gatherable_text_data', ObjectVersion.SERIALIZE_TEXT_IN_PACKAGES),
    ('soft_package_references', ObjectVersion.ADD_STRING_ASSET_REFERENCES_MAP),
    ('searchable_names', ObjectVersion.ADDED_SEARCHABLE_NAMES),
    ('persistent_guid', ObjectVersion.ADDED_PACKAGE_OWNER),
    ('owner_persistent_guid_removed', ObjectVersion.NON_OUTER_PACKAGE_IMPORT),
    ('saved_by_engine_version', ObjectVersion.ENGINE_VERSION_OBJECT),
    ('compatible_with_engine_version', ObjectVersion.PACKAGE_SUMMARY_HAS_COMPATIBLE_ENGINE_VERSION),
    ('world_tile_info', ObjectVersion.WORLD_LEVEL_INFO),
    ('chunk_id', ObjectVersion.ADDED_CHUNKID_TO_ASSETDATA_AND_UPACKAGE),
    ('chunk_id_array', ObjectVersion.CHANGED_CHUNKID_TO_BE_AN_ARRAY_OF_CHUNKIDS),
    ('preload_dependencies', ObjectVersion.PRELOAD_DEPENDENCIES_IN_COOKED_EXPORTS),
    ('names_referenced_from_export_data', ObjectVersionUE5.NAMES_REFERENCED_FROM_EXPORT_DATA),
    ('payload_toc', ObjectVersionUE5.PAYLOAD_TOC),
    ('data_resources', ObjectVersionUE5.DATA_RESOURCES),
    # export map
    ('template_index', ObjectVersion.TEMPLATEINDEX_IN_COOKED_EXPORTS),
    ('sixty_four_bit_serial_sizes', ObjectVersion.SIXTY_FOUR_BIT_EXPORTMAP_SERIALSIZES),
    ('export_package_guid_removed', ObjectVersionUE5.REMOVE_OBJECT_EXPORT_PACKAGE_GUID),
    ('is_inherited_instance', ObjectVersionUE5.TRACK_OBJECT_EXPORT_IS_INHERITED),
    ('not_always_loaded_for_editor_game', ObjectVersion.LOAD_FOR_EDITOR_GAME),
    ('is_asset', ObjectVersion.COOKED_ASSETS_IN_EDITOR_SUPPORT),
    ('generate_public_hash', ObjectVersionUE5.OPTIONAL_RESOURCES),
    ('export_dependencies', ObjectVersion.PRELOAD_DEPENDENCIES_IN_COOKED_EXPORTS),
    # import map
    ('import_package_name', ObjectVersion.NON_OUTER_PACKAGE_IMPORT),
    ('import_optional', ObjectVersionUE5.OPTIONAL_RESOURCES),
    # property tags
    ('struct_guid', ObjectVersion.STRUCT_GUID_IN_PROPERTY_TAG),
    ('array_inner_type', ObjectVersion.ARRAY_PROPERTY_INNER_TAGS),
    ('set_map_types', ObjectVersion.PROPERTY_TAG_SET_MAP_SUPPORT),
    ('property_guid', ObjectVersion.PROPERTY_GUID_IN_PROPERTY_TAG),
)


def is_gate_open(file_version: int, file_version_ue5: int, field: str) -> bool:
    """
    Check whether a version-gated field is present.

    Args:
        file_version: UE4 object version of the package
        file_version_ue5: UE5 object version of the package (0 if absent)
        field: Key into VERSION_GATES

    Returns:
        True when the governing counter has reached the gate's threshold
    """
    gate = VERSION_GATES[field]
    version = file_version_ue5 if gate.is_ue5 else file_version
    return version >= gate.threshold
