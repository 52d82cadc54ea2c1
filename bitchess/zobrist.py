"""Zobrist keys used to hash chess positions."""

from __future__ import annotations

from .square import Square
from .types import PIECES, Piece, Side

_TURN_KEY = 0x679EBE6F2ED869A4

_CASTLING_KEYS = (
    0x6B63254B15E00A87,
    0x098DC1575DDBD151,
    0xDBB675F686DF04A9,
    0x71588A053B2BD9E5,
)

_EP_KEYS = (
    0xA72780F845E9076D,
    0xFCC6F885B6C115DC,
    0x45B7A9A39104160C,
    0xFE71CFEA4F444115,
    0xE0D231BBDCC1441D,
    0xB6BA621251F6C0FA,
    0xEC9246215A2AE81C,
    0x40F734E63110B79D,
)

# Indexed by 128 * piece + 64 * side + square.
_PIECE_KEYS = (
    0xde0a6308c3df1559, 0x2c4b06b9853875cc, 0x2ab7e75c55f58ce1, 0xd870396170507503, 0x2caea0c8b9204cb4,
    0x945bed033f6e1d8d, 0xf76d7af05b02529b, 0x775d4b35eec039e6, 0x53d5a48216a62191, 0x243dec880916c9a9,
    0x29fef5bc3455c011, 0x30a3d546f5c6b927, 0x551793f279293576, 0x5a5fc4484265a753, 0x445db7d8dba2c069,
    0x937c8bd99ca1c50a, 0xeb93719dcfbba00d, 0xc0d0608adb6d182e, 0x68e46529607dfd18, 0xfd24216411914bfb,
    0xa4b0ceecf129efe9, 0x1edffbfc37a52313, 0x0400fc06ad9d84e4, 0x41f9a4b2e38bd7ac, 0xe413d19abc020a69,
    0x3c6cc1105099d2fd, 0x08c622a6f7979fbf, 0x6fd17a288e9033f9, 0x276ed95bef692bd8, 0xbab1280749265ab1,
    0x521580a23473fa0c, 0x1348a1e5292355cc, 0x3b5a506552f073f2, 0x27753e5c64796a2a, 0xe5461f6bbdcc55c4,
    0x5fcee5f2b69aad6a, 0x09fb3f09c5e45acf, 0x1955cdb32cc2dab0, 0x1b0e8cf6872c54e0, 0x44a5d8e8b293aea3,
    0x99e233e120f7a8dd, 0xf907d453c6a5eed0, 0x00412511d58a34ee, 0x2f20f19f9e8c7258, 0xded0ce51393b2a88,
    0xe2a7fa30c77baf85, 0xb7d8dd3d309ca6bd, 0xd0f5dc39eced3319, 0x291f594b0a0c467e, 0x33d0202b0fb81011,
    0xc575ee504ea6828d, 0xf0560e83a698b6a0, 0x85dcdb8f9f9faf44, 0x6ac00539848c1647, 0x82554baa06da0c1f,
    0xd560908d9c4b2f8e, 0xfdac003e8b7448d4, 0x72e20233a60f947e, 0x502683cc27256e50, 0xdea0aed6bb56e567,
    0xbdcd8ecd3511c55e, 0x2fc742759a0e6751, 0xf58db0f1db2bdf2d, 0x90dd46bc490bd51f, 0x57409a63371c37ff,
    0xa7a6b1f65dc77f73, 0x479f6ce9040fb9cb, 0xa84515f520a94558, 0x052394929296b1d4, 0xca5bc583cec4da5b,
    0xb081aa71ec1029e7, 0xd33a58578df4d86f, 0x1d3dd82ef05aa17b, 0xa3cda58bb6f0b2c2, 0x16ee1f4da8e23396,
    0x41cb63e2998cbd3c, 0x5cd0cc06f6b92c6d, 0xff0fa192d8c51a3e, 0xdc055f76340c221a, 0x5239da00d95a5f50,
    0x84810738fdeaf895, 0xdee6a2a5b1c3d37d, 0xcc9925cf449f5262, 0xc7869f3ced486357, 0x2d0a398034ef56c1,
    0x4b5fc15ccb97fac1, 0xa31a1e8bb19cdcd3, 0x197a8b5b09f480f9, 0x6160aab861162402, 0x962bbff97db3e4d5,
    0xaba17daf285be057, 0x031adae8cc315ed9, 0xa7dbfe19b98e1ae6, 0xabc758faf973ca27, 0x889b9ece0c2bbf12,
    0x08a0358547086667, 0x056313222aa52493, 0x418e116e9860db17, 0xb37cc6ed57595f11, 0x2a93f08028601c2c,
    0xec69162e1c52730d, 0xfcf4aabe9cc4e598, 0xdcdf530f5cccb284, 0x11c58334dc36e8b1, 0xd20ef324aa6f99d9,
    0x50263b867366fe32, 0xa91abc8533f25a5f, 0xc13afb32a3e1a6f1, 0x186ea08f5d72b286, 0xf66e6cf906353567,
    0xbbda2eb7fc298622, 0x7839c0dc7d05f66c, 0x5312a4c8660e21c7, 0x425804f982d474e5, 0x8774611d032492fb,
    0x4e6abda74a855288, 0x0c0376988958f099, 0x59890eee41d21058, 0xc28649fba75e4780, 0x3eff41cfd4cf6af7,
    0x8c0fed83f5bc42b8, 0x12c74531bee537cb, 0xe52e7e177824609f, 0xf56229769f6fdde2, 0x9c9e98914444cca1,
    0x4fc95c151ab86f10, 0x2848d7f8c593a00b, 0x9045fb8d27b80160, 0x277cabb115f56d3b, 0xba44000bf51e616f,
    0x3534acd32b1a3bb9, 0xfa306a6a4567b580, 0xea688f7bf8ebdeb1, 0x8fb42de86ebabbbe, 0xa55ac155576fb731,
    0xf8fad3b61cefe815, 0x2a4a832503d50e5c, 0xe00744421207b0c8, 0x43527990b0ba4afd, 0x876331a98219b8a0,
    0xc9c7befc262fa439, 0x9e554b3e09c95517, 0xb8bdf6e377a01fa5, 0x4994e6fe75a1b854, 0xbcfff32ddaa829d1,
    0x9e8cf2034184fe81, 0x4c8d40623ed84661, 0x5a873656cca99353, 0xbf878a875e8296a5, 0xd5c0274bd5409c01,
    0x1deda99d5eaf16bb, 0x4976a569f7525ae8, 0x97300c9b71cee076, 0x56357abeda7f6e3d, 0xd612f1d504b252be,
    0x7a7bca66bf923049, 0xb2e45c7f8dcdc0e9, 0x13c27573fac5b840, 0xfbbc07dd2462a800, 0x28e6908e266821ff,
    0x2d85a4bdf8d38850, 0x481590bc66e08942, 0x369d5c81f4933fc1, 0x71ba13c2ba5accfe, 0x61272376a28f17be,
    0xb33bc28a8b37cbf8, 0x1ba2573b675b19ce, 0x63a5670bf901bbe3, 0x7e92e7f3716409d4, 0xa6b22e3df82b924a,
    0xa930c2d56093c326, 0x7320a9913060b405, 0xf3612ed8fd8745f8, 0x47b5a2df17403e86, 0x57ae48ac7afefa3f,
    0x6c6f441842f25a06, 0x1df11d3b20178d24, 0x0d3a9bfab50ae4eb, 0xaea0c49755647c36, 0xfec35c552f806b34,
    0xbccaa5705daa0323, 0x4a1d045df8937b9b, 0x4b1166ba9754bc25, 0x1786e9d741d93c48, 0x9a2170506cb82ca3,
    0x22f78767fc469665, 0x365961d0ce124969, 0xf8cf363416f14c80, 0x92eb0616ad95b9ce, 0x7baa9e3c375db510,
    0x0512f8cb78565b32, 0x2e8b3dd56ece5462, 0x53ace9a06354333d, 0x7c3f03b00f2d7f34, 0xf530672b08fe525b,
    0xfa914779e896ee17, 0xa73b9e165d525a69, 0x19a2afad7d29c413, 0xece70c636a9cc882, 0xa8c4727be719c6ef,
    0x03c3d713344484d6, 0x0bd7a88bee166cc5, 0xe58689f1c1d16e5f, 0xfe749c67574bd51a, 0x22835c6c431832f6,
    0x6cb73b75be66cd73, 0x6a37cd10a652bf32, 0x9bfd4b2c934889b1, 0xa2462579ee71c41c, 0x4943a1d14ec57556,
    0x7587d71467434ba1, 0x6440cc4dd7a73f65, 0x24d79e2959e182c0, 0x71d8f2509fffd49a, 0x4afc2ae852f9be36,
    0xcabaa13ffae3f2f6, 0x632cd90e6be8cab6, 0x11fa5f2941e753a7, 0x5d0e5fa4c19a4323, 0x155fc7180d42bdb6,
    0x3866b00314de196d, 0x89020ecabe54961d, 0x0f7ab31189210bd7, 0xcc51070169a91e4b, 0x1a120b691c895940,
    0x8a5a3792f91796a6, 0x8a9c45eae8c0435f, 0xe26dc2a80bbc9d7c, 0x0eed8fb4331d0d3b, 0xcca12a4d370ff104,
    0x30d1fca41f6d5f61, 0xd591f1e9adc48555, 0xa5cc83f718a5d567, 0x9199a9c9b62b403a, 0x8aa75e58d4769339,
    0xe820a6db2ae3306a, 0xb92139dabd7f9b64, 0x00a8d59d5fc07189, 0xabf2ce3ecc479d5b, 0xe55f9f5eefa7c9c3,
    0xbf65cd2aca7a22bd, 0x390796bfc88612f8, 0x3be5d1ba97cada4a, 0xf8848047b9b052e1, 0x1175d2409e455f81,
    0x20c834b7b6a8289e, 0xe626bcdc21ed6bba, 0x53d7647dd8d3b349, 0xd80782c2c2127de8, 0x35a586d4ef7d0e58,
    0xf0b960820456a299, 0x54eba2df8d720cc7, 0x0b59ea0561ceda63, 0x8260e1acf751ca2c, 0x03ab65fdecced8e6,
    0xbb682613f7be18f9, 0xf57561bda476bdbe, 0xcfb38074eebfac5d, 0xe81020237c50c7c9, 0x0a9bd12ad018ae1f,
    0xa3c523218ee2a778, 0x7ad3f5f701249494, 0x338bee2ed6c52647, 0x93c28b922034d228, 0x8bd957fcc60271ea,
    0x2da4a013ddb276dd, 0x2e028e0ca912f5bb, 0xbba1ea419970b800, 0xbd3d3b0a997c3d6b, 0x518453336955d5ec,
    0xcddec2391691142d, 0x9646479072e401f6, 0x40c54cc93a5d3fe7, 0x7a7fcb3b1cf269d1, 0x6579b976d25c6a09,
    0xca53d54342d79279, 0xf07b3755c917427f, 0xcd02a1d3839c82c8, 0xc4de5e81459be6b5, 0xd639955d4d45c374,
    0x5800b337b0b2c4ef, 0x80d72804a2a5400b, 0xaea0f1b209b0da7a, 0xd0a237f43165a02c, 0xc841270f633eb061,
    0x87e404d3ce0a7fca, 0xd320efc83eed87f2, 0xe58f8227e0535b65, 0xc1b1313a0d220750, 0x55ded55301391cf1,
    0xc60a7b9189de2745, 0x4dcf8bba1a23dc06, 0x8434d63af6b8689d, 0x9a3828d7b0029a6d, 0x4e99cf4ea8394558,
    0x5dad7cc62d435ba2, 0xd02fb64609f3c5c6, 0x60a4591e0640f9fc, 0x0b9725c11bd162f1, 0xc1248e6d9f502607,
    0xee403582dc60e6cd, 0x8491b8d227cdf680, 0x664f708c016970f1, 0xfa6e174fcd950618, 0x48e555a919e06cfe,
    0xdf855567b3de7a23, 0xd9fde3f301c02ebd, 0x4ea3fe9159bb832e, 0xa63fd78dc539e0c6, 0xd821c0df49d365a3,
    0xe7064c1ae9704f6a, 0x58a804bcc5aa5129, 0xc5d9b733a449c222, 0xaa40ce6ce610a3e1, 0x15572a67e4923f2a,
    0x94c3f6280a4e4c35, 0x327fa8e386e1f5f7, 0x407e922598cfe65c, 0xccb2f7d8c62e37a7, 0x0a4d150f3574b850,
    0x2c8400f95f01f796, 0xd7b4655f6f56e6db, 0x041de2308d1fa30c, 0x868d5647858d4295, 0xc1eab38028417162,
    0x3c67e6f42f933292, 0xfc5f4aa4c28cb5f7, 0x8d5c298dc4d1a3f5, 0x0003f19662e929c8, 0xb55b7443588858b2,
    0xf69c9f6beee3b206, 0xfffe3e2dc976bc2e, 0xfbd62574c9939780, 0xc18393220fa04c09, 0xce863c683221119d,
    0x5cbdd826f3df5078, 0x7e4296417934071c, 0x55d28a99b5a4767d, 0xfd24ba4aab55e9c3, 0x90bbab439c8a6eab,
    0x59d3ba2a20ba9227, 0x530d1add75a03a69, 0xe0627ccebf6f606a, 0x399e273565600153, 0xe7e8e23983cd2075,
    0x359cf62093377fe7, 0x9483cc6fdaa9726b, 0xe980ed0d9963355b, 0x1ac8b723c67f08f6, 0xa188f5bf3d1c9f80,
    0x1a72967fa8759f71, 0x1473f664d0da4240, 0xad58dd5040b4f4a9, 0x0d9d71c7c179495f, 0xa2505d6875dc4cb4,
    0x8b3b0136a96de034, 0xd11c8add29d027de, 0xba8c2b44da4192d2, 0xaf6ff13c42137f0a, 0x2a8d45c38ca34187,
    0xf4160edfc598fc7f, 0x4b37b574dcbc7fa6, 0xe10cc0d830f97049, 0xade93176616fb9b8, 0x14f481057edd819d,
    0x9375e75d6c1c3e18, 0xff0b7077eff3a197, 0xb76c2b5b4e1dacda, 0xd90011954935572f, 0xa162e9f8a67c8f4a,
    0x15408bb360180971, 0x1b5f45b607e10c70, 0x9edca4c9e327dc1d, 0x3ce5daca961bf8d1, 0xc2e9a3a594ec1e67,
    0xca52a4596b4dbb0c, 0x8e0b77b7c6ab6284, 0xd6320ec37b582316, 0x7c0c62d7dec99195, 0xc581b507dbc63427,
    0x4ce7c79617aabcdc, 0x298b46e9921b76e1, 0xde40bb7088d5e76f, 0xefcd248dda243cbc, 0x3eecea148e24a3e7,
    0xefb5031b6f0242ca, 0xff0437e26dc6aeee, 0x9961d3cb80e2123a, 0x0e97f6bc8a865640, 0x079807950487b80a,
    0xc7f56abcc47e40af, 0x4f96fd1b161c077f, 0xec29027276894a93, 0xd912ff22c6d34c5b, 0x0ef749749b7f8f3a,
    0x07b1d2ed65d1baa0, 0x5417ff732de59ccd, 0x85d5fb3d93e4b6b3, 0x4e859f66c1e69a81, 0xf53990440640a5cc,
    0x0b21e5d0bb4abde6, 0x68b6d41f40fe6ee7, 0x91fff371aa1bca06, 0x1aa64991a1f52b74, 0xa8bdcd2cc14594d2,
    0x59ce83c21e33364e, 0x0f68733dd9319c3b, 0x0c14756f54d91a22, 0xc9479c17569625fe, 0x738374f4deec167b,
    0x0c8a9ee6b7330d99, 0xb0462d091e3b6f4c, 0xd7a72dd5567fc3d3, 0xa6315c4a2c633bc5, 0x4efb12afe7381fa5,
    0xe2a3c450d1274ff0, 0x5668071dd838cd97, 0x30fd489cbea4f667, 0x27398d0e46c6a1c7, 0x63013bd6a0122b0b,
    0x97ba83df1fd336f9, 0x7ee1667548f49699, 0xff88d09aeaad5043, 0x4c586fde0afee2e5, 0x25af5fb3057da27b,
    0xa71cb0df5a8151a0, 0x09639eac4753a80b, 0x5517544e55e71815, 0xaf74dd204b8ab294, 0x396373bae01d0923,
    0x1a377b9004a157b3, 0xb23fd412c77f9ff9, 0xd6f7603b7d7543f3, 0x9a767105534ef75a, 0x2190657ab34a27e8,
    0xbd6c5f3dd7a53689, 0x5f29eff3faa50b5f, 0x7a9b448b84f844ae, 0xa4e843d3309d953c, 0xe4697f04c1219311,
    0xf954ad4bfc242efb, 0x7b8bf95005013df3, 0x83ed8ed953d6a103, 0x2eb428cc49fec8de, 0x6b9b47a98a5a3885,
    0xa86832a38078d50d, 0x00cc9c1dd00de014, 0xb37276d030197e63, 0xdde0bfed24b4c89b, 0xb077ec9b8c4bd535,
    0xdc46984c0e8355d5, 0x19931251ab89caf5, 0xfcbcc65d40e50c8e, 0xecad2aad4a01e05f, 0xdf3263d0ccf43d16,
    0xb9334b27833ae3e3, 0x71c03ac239d0a60e, 0x0ad3ef0015646024, 0xb27bd94d0ac34e50, 0x4a27c72794ddcb18,
    0x69a929607c573ab5, 0x81edd6048be36593, 0x6cbd777080a1fd95, 0x22bcdc3776319dd8, 0x1a36268987666621,
    0x18fd52051eb1f67a, 0xefe68a58ae9d9c1d, 0x6e3a8ad92c15cbe3, 0x15bed59a04ecac79, 0xe579f953499ba6a0,
    0x19304ca2d59f9e76, 0xcc01166c500123b1, 0x0d1ec169097667ca, 0xa4fc7136277b52a1, 0xbdae279581c25707,
    0x371dc4b08ea2283f, 0x6556ea02401b3eab, 0x76761b73acdcc1b7, 0x6bffc3425fa6e143, 0x417e47ab78249914,
    0xc5e8a1628830da3e, 0x9e1d5ae46026a240, 0x8585b6e6ecc18c04, 0xb7c276a6f8d4f727, 0xc629e69414dd985b,
    0x3ef96d61007f4150, 0x15b2ef71b68e6721, 0xc7a980f7c7daf6bd, 0x2d88e74fad9a43be, 0x9f9abbb7881462c5,
    0x2a6c7a5c082a6f10, 0x24495f34e83fc154, 0x487aaeba2c86583e, 0x0e4208f91505b2f4, 0xd7f116f6da7841ed,
    0x426c580474443075, 0x9ddf2a20fb3898d0, 0x87401b7168785ecb, 0x08ff3f19b4088872, 0xed1d9d4830b8eac4,
    0x8d6848c6a6d5bffa, 0xcca02304f4a01d38, 0x09febdda8cebb0cf, 0xfbed956113cf3dad, 0x39f00b5bf8cdf00b,
    0x25e5e967b0b48e25, 0xa547eb8ec098bb4d, 0x64b6f5111290c19f, 0xb83392b47960c693, 0x8062b38b100a585f,
    0x134e46c18de6a802, 0x0ce120776a2fa4b8, 0xb814257f90aaa343, 0x7d686aeb364bfdaf, 0x467e51db8904af88,
    0x4d858ea596ff4d5e, 0xd1f54093fb4fbf7a, 0xd39091a5475fb283, 0xc0d158f53bb37c26, 0xe4d15a6232beb581,
    0x47f420736fe19fb5, 0xa28c9a74d4ef6bf1, 0xec21ffc36aafb904, 0x8ecf254d9c7fef9b, 0x0ddd174e617c6286,
    0xc4639a1d172deac7, 0x5be20db2b07f8832, 0x596eb390bd48167e, 0xd0d3ea73762e5326, 0x64c65103ea795380,
    0x7c0d1747a743b55e, 0x62ccce608eeaec1c, 0x8572bca03f818b5f, 0x3c4e8a8eb433fbea, 0x92efc16ae9375ea1,
    0x6ab05c37ff5b6104, 0xed0226dff754d76e, 0x42b060ee56987d72, 0x9635d344129670fb, 0x349fe117bdc8021c,
    0x1b189413810bc189, 0x2bb0b158c66ecbdb, 0x5cc31c1be60c1352, 0x50ed94f9c3b52319, 0x87336068b7331136,
    0x5c5a8e907fcbd71d, 0x53cf4234d125697a, 0xb5a8affd794b38a4, 0xc520bd9a710bc2fe, 0x4102bbbcfbfebe37,
    0x5f5ff3ace9e2399a, 0x12c822e31299bfd4, 0x3e6130e356039eb4, 0xfbf8a690e17bc97b, 0x0d155c83651db210,
    0x6af4992d6c96f8ed, 0x8282132f3f9e252e, 0x8b42c6d3fd3acdd9, 0x51bb2061c34731fb, 0xb6bdaf1ed3484586,
    0x1b29fa041dd9e5f6, 0x54d88c47d32530bd, 0xfc172b4a31ac4dd3, 0x7c603b4122d45245, 0x37b8ea2e4e5117b8,
    0xac4d53ee5f331b03, 0x5f3a932fa72c9088, 0x1316eeb5fea07afd, 0x8726fc543fc49921, 0xcce5222414561e75,
    0x39d6ed6e181c9c1f, 0x1ee13e06b29bddc7, 0x999036e7f7c9cc5c, 0x130395eb83ea99de, 0xf19e7a83adc3727e,
    0xb31bdbc7535f153e, 0x68d785ad6b4c33f8, 0x3103baf6285d7f7a, 0x0380e015d47704ea, 0xb406b34e7cb0367b,
    0xdebc071c5027ff76, 0xd76c4ea1e083bce6, 0x3b499716ceabde7c, 0x4f14a762c45f05d7, 0xda075cea70851c75,
    0xa39afe2326615a8c, 0x18d9584fb3aec6db, 0x445306a5e72a11f7, 0x9186367d9e5f7f0b, 0xf96783cc08a31d1a,
    0xb891f72427114478, 0x2ac2c30dcaceca43, 0x221c38f54ee89d29, 0xa069e86ae1960942, 0x7e62f6ee19ebf863,
    0x695d268489364249, 0xcee343224ff091a2, 0x33bd4c48cf59e7dc, 0x4e88b2ed39d5bd95, 0x5f847057d6a41dc0,
    0x974cc3c8218d2bdb, 0xdd7458f9f23298fe, 0x128b7764c916baf3, 0x6a3ebd11711c3b9e, 0xc848c73ea1d8a782,
    0x6c6b278e676c7986, 0x79645ec37a7094db, 0xe8433dc7186544b8, 0x8a0dfa9c27fa7967, 0x73c976f4f7a9571a,
    0x79585ee1bb500634, 0x50c1f96ee52ffdbb, 0x3e00feaaa5fb320c, 0xcb16ca735f780748, 0x65d40ecdd0436093,
    0x4affc5ccecb7d887, 0xa21521f6d2f1f7ea, 0xa50afd9fe4f1d116, 0x225e8c6188709051, 0x88c301490d90e6b3,
    0x0ab71b8ad1e595f4, 0x7ccb17391364b1cd, 0x7e0a9a300cd77238, 0x4cc14d1db7413b83, 0x95aabd0016fac304,
    0xd6068dfc3d0d767d, 0x857f02eb31170cc5, 0xe518971f6f14f9a9, 0xe05b8955d5652c8b, 0x1942b19774ab1e0a,
    0x8f2d942c7988e001, 0x1bd6dedf5d28e019, 0xa428659961ca71df, 0xe4ac514ad3b1a978, 0x6d9ba0ac46c66568,
    0x93dadda43bb5819c, 0x0e6de94844297cd4, 0xfa67f264206a0f7f, 0x8cc86c6445d6ff38, 0x2ef740e2c15f8e5d,
    0xb8b404dedffade2a, 0x4ef727852fc4f33f, 0xd82eb1b97d1a7d12, 0xcf136722023896bf, 0x413fe80f1c5cb769,
    0x51a19301235ce1f4, 0xa7fb72d34c9785f7, 0x1752a7165d692d83, 0x7862798cf9e90a5b, 0x04a06a8f1515b7f6,
    0x378e9a09b1ef2d41, 0xe8c5bb6e320bbfc0, 0xedb6749c35a04c20, 0xb8ff15fa41ede6fb, 0xb1aa98c8f9c24d59,
    0xe28f80297aacb175, 0x657b2ffe6473ee60, 0xc0ca52ba31ede93e, 0xf16c88bc0399721d, 0x93c31c169abe92e0,
    0x230baccd91b9802c, 0x493794c638810da9, 0x942c7078269ab247, 0x182d71ebe7e171a5, 0x3cda5c7eab7dd58c,
    0x420378945af3bf32, 0x2392cc597bd91bbf, 0x66f8134245e1da52, 0x56db05c27ba9fad9, 0xc83bc18551d6ccef,
    0x40ff0c2330ec02f6, 0x162cb6c9bcd3b537, 0x6d266a2246478673, 0x25fa80e43d6741f0, 0x905f1a9b008bf9ea,
    0x9b72080084efbffd, 0x6585773107a050f7, 0xe532c358b9ee9b56, 0x32a7d248e5209918, 0xf92be566d5a12e86,
    0x65f697d206d1d573, 0xc9b5f97b3525ba40, 0x8390615508632d39, 0xb75779a0ce95df96, 0x371110370016dce6,
    0x47d9d3d79039717e, 0x93789dc7ddd4b4b1, 0x89e347e228d1f525, 0x9de90d9002502e42, 0x6fd53ca7112c82ce,
    0xd46b66866b2589c1, 0x15d5e0baccbdef61, 0x72a2c0924843554a, 0x93b565f782e6ed29, 0x6a2b35ddaeef25cb,
    0xa53a5cad65e57ea4, 0xda05cf68eb043ab1, 0x77cb397f4090306c, 0x1996ab63a3a3b80e, 0x44be46877617d0b2,
    0x153b472d685b0d51, 0xe995db9b256ace0d, 0x564f383ccf56fd8f, 0x15fb845ee884b83c, 0xf8222c491cb444f3,
    0x3048f70c6d38600d, 0x262a7f9103587873, 0x527f416d0101a35d, 0x89d593e9bd2ce816, 0xaf7f04d18aa7ddae,
    0x050d3e344aaa9744, 0xd33dd2b82f181ca0, 0xde9c6f2ea4eba285, 0xd85a8a851d0381cd, 0x7d412b4c7cf89c63,
    0xef8b9c129af4fbd8, 0xde0ec89028c1ecc7, 0x2101c84487b47535, 0x937b98f2d26c737e, 0x8768b45d7b7f4694,
    0x0fe4c3921ca17cc5, 0x83226fe49f24d4c3, 0x950a8be82edddba8, 0x0a184c5253205f76, 0xc61ff7e4ec001739,
    0x403882a9c08e9fda, 0xd9d4c3b8b4f15806, 0xa560ff75bb942c84, 0x2dfe08a2cd3a4d50, 0xba177d16de77dd68,
    0x7de18d41f8c461f4, 0xc51630637cff9639, 0x6f3dce62962aec0d, 0x445b99cbe96cc03c, 0x250fa937eda6fdc8,
    0x4a4fa3a418480145, 0x244bf770fd27e8ab, 0xb83174cf13adad46, 0xcf785174801d6e7b, 0xea53a30d5f4dff85,
    0xc4f6bb28deee7e0b, 0xbcd05ff3713b04c2, 0xe7f50cb64b2f7b95, 0xf9e15699f4dd4058, 0x01dbba1224c79bd1,
    0x8ce0a9606486da62, 0xb783b974ff57a947, 0xd375ab531563adf0, 0xb50aa6412c99963d, 0x211e691d4ebd012d,
    0xd98c4eabe74e5d8b, 0xb60e6292d20e2e95, 0xb02ec07ac159040e, 0x7d5685f72a1f8867, 0xb1d20051f4985e5c,
    0x32c66436f7e0423c, 0x1d8f9f4abd50aa77, 0xaa7f44afb9ce05a7, 0x59435d516f12fba5, 0x73b2a84ebd34e306,
    0x2c44e2911b14e9a4, 0xed2ce4dd8d8d9858, 0x72b7d88bd1b9660f, 0x6c1e57555e40abe6, 0xb8a183dca03d4622,
    0xe1f20c6145f85fe4, 0x450a87aba3167ee7, 0x677524f27efe26fe,
)


def turn_key() -> int:
    """Key mixed in when black is to move."""
    return _TURN_KEY


def castling_key(index: int) -> int:
    """Key for a castling right: 0 white king side, 1 white queen side, 2 and 3 for black."""
    if not 0 <= index < len(_CASTLING_KEYS):
        raise ValueError(f"castling index out of range: {index}")
    return _CASTLING_KEYS[index]


def piece_key(piece: Piece, side: Side, square: Square) -> int:
    """Key for a piece of one side standing on a square."""
    piece = Piece(piece)
    if piece not in PIECES:
        raise ValueError(f"no key for piece {piece.name}")
    side = Side(side)
    return _PIECE_KEYS[128 * int(piece) + 64 * int(side) + int(square)]


def ep_key(square: Square) -> int:
    """Key for an en passant square; it depends only on the file."""
    return _EP_KEYS[square.file]